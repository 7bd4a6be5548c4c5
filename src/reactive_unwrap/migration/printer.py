"""
BindingElementPrinter: render a rewritten destructuring element as source text.
"""

from dataclasses import dataclass
from typing import Optional

from reactive_unwrap.parser import SourceFile


@dataclass(frozen=True)
class BindingElement:
    """A destructuring element as it should read after the rewrite."""

    name: str
    property_name: Optional[str] = None
    rest: bool = False
    initializer: Optional[str] = None


class BindingElementPrinter:
    """
    Serialize a BindingElement.

    Text taken from the original file (property keys, initializers) is
    emitted verbatim so string-literal quotes and computed keys survive.
    """

    def render(self, element: BindingElement, source: Optional[SourceFile] = None) -> str:
        text = element.name
        if element.property_name is not None:
            text = f"{element.property_name}: {text}"
        if element.rest:
            text = f"...{text}"
        if element.initializer is not None:
            text = f"{text} = {element.initializer}"
        return text
