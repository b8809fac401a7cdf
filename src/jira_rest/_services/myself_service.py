from typing import Optional

from .._utils import Endpoint, RequestOptions, RequestSpec
from ..models import User
from ..models.result import JiraResult
from ._base_service import BaseService


class MyselfService(BaseService):
    async def retrieve(
        self, *, expand: Optional[str] = None, opts: Optional[RequestOptions] = None
    ) -> JiraResult[User]:
        """Return details for the current user."""
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/myself"),
            params={"expand": expand},
        )
        return await self.request(spec, opts, model=User)
