from typing import Dict, List, Optional

from ..enums import ExecutionMethod
from ..helpers import compact, require_params
from ..models import Execution, ExecutionList
from ._base import JSON_HEADERS, Service


class Functions(Service):
    """Service for function executions."""

    async def list_executions(self, function_id: str, queries: Optional[List[str]] = None,
                              search: Optional[str] = None) -> ExecutionList:
        require_params(functionId=function_id)
        data = await self._client.call("GET", f"/functions/{function_id}/executions",
                                       params=compact({"queries": queries, "search": search}))
        return ExecutionList.from_dict(data)

    async def create_execution(self, function_id: str, body: Optional[str] = None, async_: Optional[bool] = None,
                               path: Optional[str] = None, method: Optional[str] = None,
                               headers: Optional[Dict[str, str]] = None,
                               scheduled_at: Optional[str] = None) -> Execution:
        """Trigger a function execution.

        Args:
            function_id: Function to run
            body: Request body passed to the function
            async_: Run in the background and return immediately
            path: Request path passed to the function
            method: HTTP method passed to the function (see ``ExecutionMethod``)
            headers: Request headers passed to the function
            scheduled_at: ISO 8601 time to run a background execution at

        Raises:
            InvalidValueError: If method is not an ExecutionMethod
        """
        require_params(functionId=function_id)
        if method is not None:
            ExecutionMethod.validate_strict(method)
        payload = compact({
            "body": body,
            "async": async_,
            "path": path,
            "method": method,
            "headers": headers,
            "scheduledAt": scheduled_at,
        })
        data = await self._client.call("POST", f"/functions/{function_id}/executions", JSON_HEADERS, payload)
        return Execution.from_dict(data)

    async def get_execution(self, function_id: str, execution_id: str) -> Execution:
        require_params(functionId=function_id, executionId=execution_id)
        return Execution.from_dict(await self._client.call("GET", f"/functions/{function_id}/executions/{execution_id}"))
