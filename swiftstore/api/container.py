from typing import List, Optional

from loguru import logger

from .api_resource import APIResource
from .types.container import ContainerMetadata


class ContainerAPI(APIResource):
    def list(self, prefix: Optional[str] = None) -> List[ContainerMetadata]:
        """
        Lists the containers of the account, in the order returned by the server
        (binary order of the names). If prefix is given, only containers whose
        name starts with it are returned.
        """
        params = {"format": "json"}
        if prefix:
            params["prefix"] = prefix
        response = self._get("", params=params)
        containers = self.ensure_list(response, ContainerMetadata)
        logger.trace(f"Listed {len(containers)} containers (prefix={prefix!r})")
        return containers
