from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


# "modern": mgfxc grammar with a combined /Defines switch.
# "legacy": fxc grammar with one /D switch per define.
BackendFamily = Literal["modern", "legacy"]


class BackendProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    family: BackendFamily
    tool: str

    # modern only
    profile: Optional[str] = None
    # legacy only
    target: Optional[str] = None

    description: Optional[str] = None
