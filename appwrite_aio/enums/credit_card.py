from ._base import ConstantSet


class CreditCard(ConstantSet):
    """Credit card brands accepted by ``Avatars.get_credit_card``."""

    label = "credit card type"

    AMERICAN_EXPRESS = "amex"
    ARGENCARD = "argencard"
    CABAL = "cabal"
    CENCOSUD = "cencosud"
    DINERS_CLUB = "diners"
    DISCOVER = "discover"
    ELO = "elo"
    HIPERCARD = "hipercard"
    JCB = "jcb"
    MASTERCARD = "mastercard"
    NARANJA = "naranja"
    # server-side token keeps this spelling
    TARJETA_SHOPPING = "targeta-shopping"
    UNION_CHINA_PAY = "union-china-pay"
    VISA = "visa"
    MIR = "mir"
    MAESTRO = "maestro"
