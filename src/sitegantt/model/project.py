# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from sitegantt.model.entity_id import EntityId


class Project(TypedDict):
    id: EntityId
    name: str
    client: Optional[str]
    start_date: Optional[str]
    end_date: Optional[str]
