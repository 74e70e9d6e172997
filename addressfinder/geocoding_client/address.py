"""
Address Finder - Address Record

Immutable result record built from a single entry of a geocoding response.
"""

from dataclasses import dataclass, field
from typing import Optional


# Google address component type -> Address attribute
_COMPONENT_FIELDS = {
    "street_number": "street_number",
    "route": "route",
    "premise": "premise",
    "sublocality": "sub_locality",
    "locality": "locality",
    "administrative_area_level_2": "sub_admin_area",
    "administrative_area_level_1": "admin_area",
    "postal_code": "postal_code",
    "country": "country",
}


@dataclass(frozen=True)
class Address:
    """A single geocoded address.

    Only ``formatted_address`` is guaranteed to be non-empty; everything
    else depends on what the backend returned and on whether address
    components were parsed.
    """
    formatted_address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    place_id: str = ""
    types: tuple = ()
    street_number: str = ""
    route: str = ""
    premise: str = ""
    sub_locality: str = ""
    locality: str = ""
    sub_admin_area: str = ""
    admin_area: str = ""
    postal_code: str = ""
    country: str = ""
    country_code: str = ""
    partial_match: bool = field(default=False, compare=False)

    @classmethod
    def from_json(cls, obj: dict, parse_components: bool = True) -> "Address":
        """Build an Address from one element of the ``results`` array."""
        location = (obj.get("geometry") or {}).get("location") or {}
        kwargs = {
            "formatted_address": obj.get("formatted_address", ""),
            "latitude": location.get("lat"),
            "longitude": location.get("lng"),
            "place_id": obj.get("place_id", ""),
            "types": tuple(obj.get("types", ())),
            "partial_match": bool(obj.get("partial_match", False)),
        }
        if parse_components:
            for component in obj.get("address_components", ()):
                ctypes = component.get("types", ())
                for ctype in ctypes:
                    attr = _COMPONENT_FIELDS.get(ctype)
                    if attr and attr not in kwargs:
                        kwargs[attr] = component.get("long_name", "")
                if "country" in ctypes:
                    kwargs["country_code"] = component.get("short_name", "")
        return cls(**kwargs)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def describe(self) -> str:
        """Return a multi-line human readable description for detail views."""
        lines = [self.formatted_address]
        if self.has_location:
            lines.append(f"Location: {self.latitude:.6f}, {self.longitude:.6f}")
        street = " ".join(p for p in (self.street_number, self.route) if p)
        for label, value in (
            ("Street", street),
            ("Premise", self.premise),
            ("District", self.sub_locality),
            ("City", self.locality),
            ("County", self.sub_admin_area),
            ("State", self.admin_area),
            ("Postal code", self.postal_code),
            ("Country", self.country),
        ):
            if value:
                lines.append(f"{label}: {value}")
        if self.types:
            lines.append(f"Types: {', '.join(self.types)}")
        if self.partial_match:
            lines.append("(partial match)")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.formatted_address
