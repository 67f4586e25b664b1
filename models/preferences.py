"""Preference profile and shop product records consumed by the product ranker."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional


def _ensure_list(value: Any) -> List[str]:
    """Coerce a scalar or iterable into a list of non-empty strings."""

    if value is None:
        return []
    if isinstance(value, str):
        values: Iterable[Any] = [value]
    elif isinstance(value, (list, tuple, set, frozenset)):
        values = value
    else:
        values = [value]
    return [str(v).strip() for v in values if str(v).strip()]


def _pick(raw: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_float(value: Any) -> Optional[float]:
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass
class PreferenceProfile:
    """A user's stated shopping preferences."""

    gender: Optional[str] = None
    preferred_styles: List[str] = field(default_factory=list)
    preferred_colors: List[str] = field(default_factory=list)
    materials: List[str] = field(default_factory=list)
    fit_types: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "PreferenceProfile":
        """Build a profile from camelCase or snake_case keys."""

        price_range = _pick(raw, "price_range", "priceRange") or {}
        min_price = _pick(raw, "min_price", "minPrice")
        max_price = _pick(raw, "max_price", "maxPrice")
        if isinstance(price_range, dict):
            min_price = min_price if min_price is not None else price_range.get("min")
            max_price = max_price if max_price is not None else price_range.get("max")
        elif isinstance(price_range, (list, tuple)) and len(price_range) == 2:
            min_price = min_price if min_price is not None else price_range[0]
            max_price = max_price if max_price is not None else price_range[1]

        gender = _pick(raw, "gender")
        return cls(
            gender=str(gender) if gender else None,
            preferred_styles=_ensure_list(_pick(raw, "preferred_styles", "preferredStyles")),
            preferred_colors=_ensure_list(_pick(raw, "preferred_colors", "preferredColors")),
            materials=_ensure_list(_pick(raw, "materials", "preferredMaterials")),
            fit_types=_ensure_list(_pick(raw, "fit_types", "fitType", "fit_type")),
            sizes=_ensure_list(_pick(raw, "sizes")),
            min_price=_optional_float(min_price),
            max_price=_optional_float(max_price),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ShopProduct:
    """An external catalog entry."""

    product_id: str
    name: str = ""
    brand: Optional[str] = None
    platform: Optional[str] = None
    gender: Optional[str] = None
    color: Optional[str] = None
    category: Optional[str] = None
    style: Optional[str] = None
    styles: List[str] = field(default_factory=list)
    material: Optional[str] = None
    fit_type: Optional[str] = None
    sizes: List[str] = field(default_factory=list)
    price: Optional[float] = None
    image_url: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "ShopProduct":
        product_id = _pick(raw, "product_id", "id")
        if product_id is None:
            raise ValueError("Missing required field for ShopProduct: product_id")
        return cls(
            product_id=str(product_id),
            name=str(_pick(raw, "name", "title") or ""),
            brand=_optional_str(_pick(raw, "brand")),
            platform=_optional_str(_pick(raw, "platform")),
            gender=_optional_str(_pick(raw, "gender")),
            color=_optional_str(_pick(raw, "color")),
            category=_optional_str(_pick(raw, "category", "category3")),
            style=_optional_str(_pick(raw, "style", "category4")),
            styles=_ensure_list(_pick(raw, "styles")),
            material=_optional_str(_pick(raw, "material")),
            fit_type=_optional_str(_pick(raw, "fit_type", "fitType")),
            sizes=_ensure_list(_pick(raw, "sizes")),
            price=_optional_float(_pick(raw, "price")),
            image_url=_optional_str(_pick(raw, "image_url")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["PreferenceProfile", "ShopProduct"]
