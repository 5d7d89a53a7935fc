"""Declared target → shape associations (metadata indirection).

A target whose own class body is unsuitable for column markers (generated,
shared, or owned elsewhere) borrows its layout from a separate shape model::

    class PayrollLineLayout(BaseModel):
        ssn: Annotated[str, Column(0, 9)] = ""

    @uses_layout(PayrollLineLayout)
    class PayrollLine(BaseModel):
        ssn: str = ""

Associations are looked up by exact type and are not inherited.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog
from pydantic import BaseModel

from fixedwidth.core.exceptions import SchemaConfigurationError
from fixedwidth.core.types import RecordT

log = structlog.get_logger(__name__)


class LayoutRegistry:
    """Maps target record types to the shape models that describe their columns."""

    def __init__(self) -> None:
        self._shapes: dict[type[BaseModel], type[BaseModel]] = {}

    def associate(self, target_type: type[BaseModel], shape_type: type[BaseModel]) -> None:
        """Declare that ``target_type`` reads its columns from ``shape_type``.

        Re-declaring the same pair is a no-op; pointing a target at a second,
        different shape is a configuration error.
        """
        for tp in (target_type, shape_type):
            if not (isinstance(tp, type) and issubclass(tp, BaseModel)):
                raise SchemaConfigurationError(tp, "layout associations require pydantic models")
        existing = self._shapes.setdefault(target_type, shape_type)
        if existing is not shape_type:
            raise SchemaConfigurationError(
                target_type, f"already uses layout {existing.__name__}"
            )
        log.debug("layout_associated", target=target_type.__name__, shape=shape_type.__name__)

    def shape_for(self, target_type: type[BaseModel]) -> type[BaseModel] | None:
        return self._shapes.get(target_type)

    def __contains__(self, target_type: object) -> bool:
        return target_type in self._shapes


default_registry = LayoutRegistry()


def uses_layout(
    shape_type: type[BaseModel], *, registry: LayoutRegistry | None = None
) -> Callable[[type[RecordT]], type[RecordT]]:
    """Class decorator declaring the shape model a target record decodes with."""

    def decorator(target_type: type[RecordT]) -> type[RecordT]:
        reg = registry if registry is not None else default_registry
        reg.associate(target_type, shape_type)
        return target_type

    return decorator
