# accessibility/element.py
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr

# scalar fields are strict: a snapshot with "10" or true for a number is malformed
class Frame(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: StrictFloat
    y: StrictFloat
    width: StrictFloat
    height: StrictFloat

class AccessibilityElement(BaseModel):
    """
    One node of an accessibility snapshot as reported by the simulator.
    Wire names (`type`, `AXLabel`, `AXUniqueId`) are kept as aliases so the
    model round-trips the snapshot JSON unchanged.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    kind: Optional[StrictStr] = Field(default=None, alias="type")
    frame: Optional[Frame] = None
    children: Optional[Tuple["AccessibilityElement", ...]] = None

    raw_label: Optional[StrictStr] = Field(default=None, alias="AXLabel")
    raw_identifier: Optional[StrictStr] = Field(default=None, alias="AXUniqueId")

    @property
    def normalized_label(self) -> Optional[str]:
        return _strip(self.raw_label)

    @property
    def normalized_identifier(self) -> Optional[str]:
        return _strip(self.raw_identifier)

def _strip(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()
