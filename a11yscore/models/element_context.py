from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class ElementContext:
    """
    Runtime properties of the element a violation points at.
    Resolved by the caller (browser, fixture, cache) before scoring.
    """
    is_in_viewport: bool = False
    is_hidden: bool = False
    is_in_modal: bool = False
    has_complex_descendants: bool = False
    tag_name: str = ""
    aria_attributes: Dict[str, str] = field(default_factory=dict)
    screenshot_path: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ElementContext":
        return cls(
            is_in_viewport=bool(raw.get("isInViewport", False)),
            is_hidden=bool(raw.get("isHidden", False)),
            is_in_modal=bool(raw.get("isInModal", False)),
            has_complex_descendants=bool(raw.get("hasComplexDescendants", False)),
            tag_name=str(raw.get("tagName") or "").lower(),
            aria_attributes={
                str(k): str(v) for k, v in (raw.get("ariaAttributes") or {}).items()
            },
            screenshot_path=raw.get("screenshotPath"),
        )

    def to_dict(self) -> dict:
        return {
            "isInViewport": self.is_in_viewport,
            "isHidden": self.is_hidden,
            "isInModal": self.is_in_modal,
            "hasComplexDescendants": self.has_complex_descendants,
            "tagName": self.tag_name,
            "ariaAttributes": dict(self.aria_attributes),
            "screenshotPath": self.screenshot_path,
        }
