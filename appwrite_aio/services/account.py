"""Account service.

Operations on the account of the user the client is authenticated as:
profile, sessions, tokens, MFA, identities and push targets.
"""
import logging
from typing import Any, Dict, List, Optional

from ..enums import AuthenticationFactor, AuthenticatorType, OAuthProvider
from ..helpers import compact, require_params
from ..models import (
    IdentityList,
    Jwt,
    LogList,
    MfaChallenge,
    MfaFactors,
    MfaRecoveryCodes,
    MfaType,
    Preferences,
    Session,
    SessionList,
    Target,
    Token,
    User,
)
from ._base import JSON_HEADERS, Service

log = logging.getLogger(__name__)


class Account(Service):
    """Service for the current user's account."""

    # -------------------------
    # Profile
    # -------------------------
    async def get(self) -> User:
        """Get the currently logged in user."""
        return User.from_dict(await self._client.call("GET", "/account"))

    async def create(self, user_id: str, email: str, password: str, name: Optional[str] = None) -> User:
        """Register a new account.

        Args:
            user_id: Id for the user, e.g. ``ID.unique()``
            email: User email
            password: Password, at least 8 characters
            name: Display name
        """
        require_params(userId=user_id, email=email, password=password)
        payload = compact({"userId": user_id, "email": email, "password": password, "name": name})
        return User.from_dict(await self._client.call("POST", "/account", JSON_HEADERS, payload))

    async def update_email(self, email: str, password: str) -> User:
        require_params(email=email, password=password)
        payload = {"email": email, "password": password}
        return User.from_dict(await self._client.call("PATCH", "/account/email", JSON_HEADERS, payload))

    async def update_name(self, name: str) -> User:
        require_params(name=name)
        return User.from_dict(await self._client.call("PATCH", "/account/name", JSON_HEADERS, {"name": name}))

    async def update_password(self, password: str, old_password: Optional[str] = None) -> User:
        """Update the password; old_password is required unless the user signed in through OAuth2, a magic URL or a phone token."""
        require_params(password=password)
        payload = compact({"password": password, "oldPassword": old_password})
        return User.from_dict(await self._client.call("PATCH", "/account/password", JSON_HEADERS, payload))

    async def update_phone(self, phone: str, password: str) -> User:
        require_params(phone=phone, password=password)
        payload = {"phone": phone, "password": password}
        return User.from_dict(await self._client.call("PATCH", "/account/phone", JSON_HEADERS, payload))

    async def get_prefs(self) -> Preferences:
        return Preferences.from_dict(await self._client.call("GET", "/account/prefs"))

    async def update_prefs(self, prefs: Dict[str, Any]) -> User:
        """Replace the user's preferences."""
        require_params(prefs=prefs)
        return User.from_dict(await self._client.call("PATCH", "/account/prefs", JSON_HEADERS, {"prefs": prefs}))

    async def update_status(self) -> User:
        """Block the current account. The user record is kept."""
        log.info("Blocking current account")
        return User.from_dict(await self._client.call("PATCH", "/account/status", JSON_HEADERS))

    # -------------------------
    # Identities / logs / JWT
    # -------------------------
    async def list_identities(self, queries: Optional[List[str]] = None) -> IdentityList:
        data = await self._client.call("GET", "/account/identities", params=compact({"queries": queries}))
        return IdentityList.from_dict(data)

    async def delete_identity(self, identity_id: str) -> None:
        require_params(identityId=identity_id)
        await self._client.call("DELETE", f"/account/identities/{identity_id}", JSON_HEADERS)

    async def create_jwt(self) -> Jwt:
        """Create a JWT for the current session, valid for 15 minutes."""
        return Jwt.from_dict(await self._client.call("POST", "/account/jwts", JSON_HEADERS))

    async def list_logs(self, queries: Optional[List[str]] = None) -> LogList:
        data = await self._client.call("GET", "/account/logs", params=compact({"queries": queries}))
        return LogList.from_dict(data)

    # -------------------------
    # MFA
    # -------------------------
    async def update_mfa(self, mfa: bool) -> User:
        require_params(mfa=mfa)
        return User.from_dict(await self._client.call("PATCH", "/account/mfa", JSON_HEADERS, {"mfa": mfa}))

    async def create_mfa_authenticator(self, type: str) -> MfaType:
        """Add an authenticator app; returns the secret and otpauth URI to show the user.

        Raises:
            InvalidValueError: If type is not an AuthenticatorType
        """
        AuthenticatorType.validate_strict(type)
        data = await self._client.call("POST", f"/account/mfa/authenticators/{type}", JSON_HEADERS)
        return MfaType.from_dict(data)

    async def update_mfa_authenticator(self, type: str, otp: str) -> User:
        """Verify an authenticator app with a one-time password."""
        AuthenticatorType.validate_strict(type)
        require_params(otp=otp)
        data = await self._client.call("PUT", f"/account/mfa/authenticators/{type}", JSON_HEADERS, {"otp": otp})
        return User.from_dict(data)

    async def delete_mfa_authenticator(self, type: str) -> None:
        AuthenticatorType.validate_strict(type)
        await self._client.call("DELETE", f"/account/mfa/authenticators/{type}", JSON_HEADERS)

    async def create_mfa_challenge(self, factor: str) -> MfaChallenge:
        """Start an MFA challenge through factor (email, phone, totp or recoverycode)."""
        AuthenticationFactor.validate_strict(factor)
        data = await self._client.call("POST", "/account/mfa/challenge", JSON_HEADERS, {"factor": factor})
        return MfaChallenge.from_dict(data)

    async def update_mfa_challenge(self, challenge_id: str, otp: str) -> Session:
        """Complete an MFA challenge."""
        require_params(challengeId=challenge_id, otp=otp)
        payload = {"challengeId": challenge_id, "otp": otp}
        return Session.from_dict(await self._client.call("PUT", "/account/mfa/challenge", JSON_HEADERS, payload))

    async def list_mfa_factors(self) -> MfaFactors:
        return MfaFactors.from_dict(await self._client.call("GET", "/account/mfa/factors"))

    async def get_mfa_recovery_codes(self) -> MfaRecoveryCodes:
        return MfaRecoveryCodes.from_dict(await self._client.call("GET", "/account/mfa/recovery-codes"))

    async def create_mfa_recovery_codes(self) -> MfaRecoveryCodes:
        """Generate recovery codes; only allowed once, use update_mfa_recovery_codes afterwards."""
        data = await self._client.call("POST", "/account/mfa/recovery-codes", JSON_HEADERS)
        return MfaRecoveryCodes.from_dict(data)

    async def update_mfa_recovery_codes(self) -> MfaRecoveryCodes:
        data = await self._client.call("PATCH", "/account/mfa/recovery-codes", JSON_HEADERS)
        return MfaRecoveryCodes.from_dict(data)

    # -------------------------
    # Recovery / verification
    # -------------------------
    async def create_recovery(self, email: str, url: str) -> Token:
        """Email a password recovery link pointing to url."""
        require_params(email=email, url=url)
        payload = {"email": email, "url": url}
        return Token.from_dict(await self._client.call("POST", "/account/recovery", JSON_HEADERS, payload))

    async def update_recovery(self, user_id: str, secret: str, password: str) -> Token:
        """Complete a password recovery with the secret from the recovery link."""
        require_params(userId=user_id, secret=secret, password=password)
        payload = {"userId": user_id, "secret": secret, "password": password}
        return Token.from_dict(await self._client.call("PUT", "/account/recovery", JSON_HEADERS, payload))

    async def create_verification(self, url: str) -> Token:
        require_params(url=url)
        return Token.from_dict(await self._client.call("POST", "/account/verification", JSON_HEADERS, {"url": url}))

    async def update_verification(self, user_id: str, secret: str) -> Token:
        require_params(userId=user_id, secret=secret)
        payload = {"userId": user_id, "secret": secret}
        return Token.from_dict(await self._client.call("PUT", "/account/verification", JSON_HEADERS, payload))

    async def create_phone_verification(self) -> Token:
        return Token.from_dict(await self._client.call("POST", "/account/verification/phone", JSON_HEADERS))

    async def update_phone_verification(self, user_id: str, secret: str) -> Token:
        require_params(userId=user_id, secret=secret)
        payload = {"userId": user_id, "secret": secret}
        return Token.from_dict(await self._client.call("PUT", "/account/verification/phone", JSON_HEADERS, payload))

    # -------------------------
    # Sessions
    # -------------------------
    async def list_sessions(self) -> SessionList:
        return SessionList.from_dict(await self._client.call("GET", "/account/sessions"))

    async def delete_sessions(self) -> None:
        """Log out of every session."""
        log.info("Deleting all sessions of current account")
        await self._client.call("DELETE", "/account/sessions", JSON_HEADERS)

    async def create_anonymous_session(self) -> Session:
        log.info("Creating anonymous session")
        return Session.from_dict(await self._client.call("POST", "/account/sessions/anonymous", JSON_HEADERS))

    async def create_email_password_session(self, email: str, password: str) -> Session:
        require_params(email=email, password=password)
        log.info("Creating email/password session")
        payload = {"email": email, "password": password}
        return Session.from_dict(await self._client.call("POST", "/account/sessions/email", JSON_HEADERS, payload))

    async def update_magic_url_session(self, user_id: str, secret: str) -> Session:
        require_params(userId=user_id, secret=secret)
        payload = {"userId": user_id, "secret": secret}
        return Session.from_dict(await self._client.call("PUT", "/account/sessions/magic-url", JSON_HEADERS, payload))

    def create_oauth2_session(self, provider: str, success: Optional[str] = None,
                              failure: Optional[str] = None, scopes: Optional[List[str]] = None) -> str:
        """Return the URL that starts an OAuth2 login with provider.

        The user is sent to this URL; the server redirects back to success or
        failure when the flow ends.

        Raises:
            InvalidValueError: If provider is not an OAuthProvider
        """
        OAuthProvider.validate_strict(provider)
        params = compact({"success": success, "failure": failure, "scopes": scopes})
        return self._client.build_url(f"/account/sessions/oauth2/{provider}", params)

    async def update_phone_session(self, user_id: str, secret: str) -> Session:
        require_params(userId=user_id, secret=secret)
        payload = {"userId": user_id, "secret": secret}
        return Session.from_dict(await self._client.call("PUT", "/account/sessions/phone", JSON_HEADERS, payload))

    async def create_session(self, user_id: str, secret: str) -> Session:
        """Exchange a token secret for a session."""
        require_params(userId=user_id, secret=secret)
        payload = {"userId": user_id, "secret": secret}
        return Session.from_dict(await self._client.call("POST", "/account/sessions/token", JSON_HEADERS, payload))

    async def get_session(self, session_id: str) -> Session:
        """Get a session; use ``current`` for the session in use."""
        require_params(sessionId=session_id)
        return Session.from_dict(await self._client.call("GET", f"/account/sessions/{session_id}"))

    async def update_session(self, session_id: str) -> Session:
        """Extend a session; refreshes the provider access token for OAuth2 sessions."""
        require_params(sessionId=session_id)
        return Session.from_dict(await self._client.call("PATCH", f"/account/sessions/{session_id}", JSON_HEADERS))

    async def delete_session(self, session_id: str) -> None:
        require_params(sessionId=session_id)
        await self._client.call("DELETE", f"/account/sessions/{session_id}", JSON_HEADERS)

    # -------------------------
    # Push targets
    # -------------------------
    async def create_push_target(self, target_id: str, identifier: str, provider_id: Optional[str] = None) -> Target:
        require_params(targetId=target_id, identifier=identifier)
        payload = compact({"targetId": target_id, "identifier": identifier, "providerId": provider_id})
        return Target.from_dict(await self._client.call("POST", "/account/targets/push", JSON_HEADERS, payload))

    async def update_push_target(self, target_id: str, identifier: str) -> Target:
        require_params(targetId=target_id, identifier=identifier)
        data = await self._client.call("PUT", f"/account/targets/{target_id}/push", JSON_HEADERS,
                                       {"identifier": identifier})
        return Target.from_dict(data)

    async def delete_push_target(self, target_id: str) -> None:
        require_params(targetId=target_id)
        await self._client.call("DELETE", f"/account/targets/{target_id}/push", JSON_HEADERS)

    # -------------------------
    # Tokens
    # -------------------------
    async def create_email_token(self, user_id: str, email: str, phrase: Optional[bool] = None) -> Token:
        """Email a one-time login code; phrase adds a security phrase to the email."""
        require_params(userId=user_id, email=email)
        payload = compact({"userId": user_id, "email": email, "phrase": phrase})
        return Token.from_dict(await self._client.call("POST", "/account/tokens/email", JSON_HEADERS, payload))

    async def create_magic_url_token(self, user_id: str, email: str, url: Optional[str] = None,
                                     phrase: Optional[bool] = None) -> Token:
        require_params(userId=user_id, email=email)
        payload = compact({"userId": user_id, "email": email, "url": url, "phrase": phrase})
        return Token.from_dict(await self._client.call("POST", "/account/tokens/magic-url", JSON_HEADERS, payload))

    def create_oauth2_token(self, provider: str, success: Optional[str] = None,
                            failure: Optional[str] = None, scopes: Optional[List[str]] = None) -> str:
        """Return the URL that starts an OAuth2 token flow with provider."""
        OAuthProvider.validate_strict(provider)
        params = compact({"success": success, "failure": failure, "scopes": scopes})
        return self._client.build_url(f"/account/tokens/oauth2/{provider}", params)

    async def create_phone_token(self, user_id: str, phone: str) -> Token:
        """Send an SMS login code to phone."""
        require_params(userId=user_id, phone=phone)
        payload = {"userId": user_id, "phone": phone}
        return Token.from_dict(await self._client.call("POST", "/account/tokens/phone", JSON_HEADERS, payload))
