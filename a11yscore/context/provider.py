from typing import Mapping, Optional, Protocol

from a11yscore.models.element_context import ElementContext


class ElementContextProvider(Protocol):
    """
    Narrow boundary to whatever can inspect a live page.
    Returns None when the element cannot be resolved.
    """

    async def get_element_context(self, selector: str) -> Optional[ElementContext]:
        ...


class StaticContextProvider:
    """
    Pre-resolved contexts keyed by selector (API payloads, fixtures, caches).
    """

    def __init__(self, contexts: Optional[Mapping[str, ElementContext]] = None):
        self._contexts = dict(contexts or {})

    async def get_element_context(self, selector: str) -> Optional[ElementContext]:
        return self._contexts.get(selector)
