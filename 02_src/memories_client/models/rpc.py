"""RPC request/result shapes shared by the gateway and the façades."""

from dataclasses import dataclass, field
from typing import Any, Union

ID = str

JSONObject = dict[str, Any]
# Actions return an object, Queries an array whose first element is the result
RpcResult = Union[JSONObject, list[Any]]


@dataclass
class RpcRequest:
    """One backend call: /<ServiceName>/<actionName> plus JSON payload."""

    endpoint: str
    payload: JSONObject = field(default_factory=dict)

    @property
    def is_query(self) -> bool:
        """Query names start with an underscore (e.g. /Groups/_listGroupsForUser)."""
        return self.endpoint.rsplit("/", 1)[-1].startswith("_")


def first_result(result: RpcResult) -> Any:
    """Unwrap a Query result; Action results are returned as-is."""
    if isinstance(result, list):
        return result[0] if result else None
    return result
