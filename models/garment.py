"""Garment data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from models.taxonomy import (
    FunctionalSlot,
    GarmentSource,
    normalize_color_name,
    normalize_slot,
)


def _first_present(metadata: Dict[str, Any], *keys: str) -> Optional[Any]:
    """Return the first non-empty value among ``keys``."""

    for key in keys:
        value = metadata.get(key)
        if value not in (None, ""):
            return value
    return None


def _coerce_source(value: Any) -> GarmentSource:
    if isinstance(value, GarmentSource):
        return value
    key = str(value or "").strip().lower()
    if key in {"shop", "external", "product"}:
        return GarmentSource.EXTERNAL
    return GarmentSource.OWNED


@dataclass(frozen=True)
class Garment:
    """A classified clothing item as the engine sees it.

    ``slot`` keeps the raw classification label (for example ``"Sneakers"``);
    use :attr:`functional_slot` for the normalised value.
    """

    item_id: str
    title: str = ""
    color: str = ""
    slot: str = ""
    style: Optional[str] = None
    source: GarmentSource = GarmentSource.OWNED
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", normalize_color_name(self.color))
        object.__setattr__(self, "source", _coerce_source(self.source))
        if self.style is not None and not str(self.style).strip():
            object.__setattr__(self, "style", None)

    @property
    def functional_slot(self) -> Union[FunctionalSlot, str]:
        return normalize_slot(self.slot)

    def summary(self) -> str:
        """Short human-readable description used in oracle prompts."""

        slot = self.functional_slot
        slot_label = slot.value if isinstance(slot, FunctionalSlot) else slot
        return f"{self.title or self.item_id} ({self.color or 'unknown color'}, {slot_label or 'unknown'})"

    def to_dict(self) -> Dict[str, Any]:
        slot = self.functional_slot
        return {
            "item_id": self.item_id,
            "title": self.title,
            "color": self.color,
            "slot": self.slot,
            "functional_slot": slot.value if isinstance(slot, FunctionalSlot) else slot,
            "style": self.style,
            "source": self.source.value,
            "image_url": self.image_url,
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> Garment:
    """Factory to build a :class:`Garment` from a loose classification record.

    Accepts the field names used by the classification pipeline
    (``category3`` for the slot, ``category4`` for the aesthetic) as well as
    the plain ``slot``/``style`` names.
    """

    item_id = _first_present(metadata, "item_id", "id")
    if item_id is None:
        raise ValueError("Missing required field for Garment: item_id")

    style = _first_present(metadata, "style", "category4")
    return Garment(
        item_id=str(item_id),
        title=str(_first_present(metadata, "title", "name") or ""),
        color=str(metadata.get("color") or ""),
        slot=str(_first_present(metadata, "slot", "category3", "category") or ""),
        style=str(style) if style is not None else None,
        source=_coerce_source(metadata.get("source")),
        image_url=metadata.get("image_url"),
    )


__all__ = ["Garment", "from_raw_metadata"]
