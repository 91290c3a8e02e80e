"""
bindle_core.invoice
-------------------
In-memory model of a bindle invoice: the named, versioned bundle description,
its content-addressed parcels, membership groups and the signatures attached
to it.

Python attributes are snake_case; ``to_dict()`` / ``from_dict()`` map them to
the wire field names (``bindleVersion``, ``parcel``, ``label``, ``sha256``,
``signature`` ...) so invoices round-trip with other bindle implementations.
Optional fields that are unset are left out of the dict entirely.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from .constants import BINDLE_VERSION
from .roles import Role, parse_role
from .utils import sha256


@dataclass
class BindleSpec:
    name: str
    version: str
    authors: List[str] = field(default_factory=list)
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"name": self.name, "version": self.version}
        if self.description is not None:
            d["description"] = self.description
        if self.authors:
            d["authors"] = list(self.authors)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BindleSpec":
        return cls(
            name=data["name"],
            version=data["version"],
            authors=list(data.get("authors", [])),
            description=data.get("description"),
        )


@dataclass
class Label:
    """Metadata of a stored parcel. ``sha256`` is lowercase hex of the parcel bytes."""
    sha256: str
    media_type: str = "application/octet-stream"
    name: str = ""
    size: int = 0
    annotations: Optional[Dict[str, str]] = None
    feature: Optional[Dict[str, Dict[str, str]]] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "sha256": self.sha256,
            "mediaType": self.media_type,
            "name": self.name,
            "size": self.size,
        }
        if self.annotations:
            d["annotations"] = dict(self.annotations)
        if self.feature:
            d["feature"] = {k: dict(v) for k, v in self.feature.items()}
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Label":
        feature = data.get("feature")
        return cls(
            sha256=data["sha256"],
            media_type=data.get("mediaType", "application/octet-stream"),
            name=data.get("name", ""),
            size=int(data.get("size", 0)),
            annotations=dict(data["annotations"]) if data.get("annotations") else None,
            feature={k: dict(v) for k, v in feature.items()} if feature else None,
        )


@dataclass
class Condition:
    """Associates a parcel with the groups it belongs to or requires."""
    member_of: List[str] = field(default_factory=list)
    requires: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        if self.member_of:
            d["memberOf"] = list(self.member_of)
        if self.requires:
            d["requires"] = list(self.requires)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Condition":
        return cls(
            member_of=list(data.get("memberOf", [])),
            requires=list(data.get("requires", [])),
        )


@dataclass
class Parcel:
    label: Label
    conditions: Optional[Condition] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"label": self.label.to_dict()}
        if self.conditions is not None:
            d["conditions"] = self.conditions.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Parcel":
        cond = data.get("conditions")
        return cls(
            label=Label.from_dict(data["label"]),
            conditions=Condition.from_dict(cond) if cond is not None else None,
        )


@dataclass
class Group:
    name: str
    required: Optional[bool] = None
    satisfied_by: Optional[str] = None  # "allOf" | "oneOf" | "optional"

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"name": self.name}
        if self.required is not None:
            d["required"] = self.required
        if self.satisfied_by is not None:
            d["satisfiedBy"] = self.satisfied_by
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        return cls(
            name=data["name"],
            required=data.get("required"),
            satisfied_by=data.get("satisfiedBy"),
        )


@dataclass(frozen=True)
class Signature:
    """
    One attestation on an invoice. ``signature`` and ``key`` are base64
    (standard alphabet, padded); ``at`` is a unix timestamp in seconds.
    """
    by: str
    signature: str
    key: str
    role: Role
    at: int

    def __post_init__(self):
        # direct construction takes wire tokens too; unknown roles never get in
        object.__setattr__(self, "role", parse_role(self.role))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "by": self.by,
            "signature": self.signature,
            "key": self.key,
            "role": self.role.value,
            "at": self.at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Signature":
        return cls(
            by=data["by"],
            signature=data["signature"],
            key=data["key"],
            role=parse_role(data["role"]),
            at=int(data["at"]),
        )


@dataclass
class Invoice:
    bindle: BindleSpec
    bindle_version: str = BINDLE_VERSION
    yanked: Optional[bool] = None
    annotations: Dict[str, str] = field(default_factory=dict)
    parcels: List[Parcel] = field(default_factory=list)
    groups: List[Group] = field(default_factory=list)
    # append-only; grows through add_signature() only
    _signatures: Tuple[Signature, ...] = field(default=(), init=False, repr=False)

    def name(self) -> str:
        """Bindle id, e.g. ``example.com/foo/1.0.0``."""
        return f"{self.bindle.name}/{self.bindle.version}"

    @property
    def authors(self) -> List[str]:
        return self.bindle.authors

    @property
    def signatures(self) -> Tuple[Signature, ...]:
        return self._signatures

    def add_signature(self, sig: Signature) -> None:
        self._signatures = self._signatures + (sig,)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"bindleVersion": self.bindle_version}
        if self.yanked is not None:
            d["yanked"] = self.yanked
        d["bindle"] = self.bindle.to_dict()
        if self.annotations:
            d["annotations"] = dict(self.annotations)
        if self.signatures:
            d["signature"] = [s.to_dict() for s in self.signatures]
        if self.parcels:
            d["parcel"] = [p.to_dict() for p in self.parcels]
        if self.groups:
            d["group"] = [g.to_dict() for g in self.groups]
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Invoice":
        invoice = cls(
            bindle=BindleSpec.from_dict(data["bindle"]),
            bindle_version=data.get("bindleVersion", BINDLE_VERSION),
            yanked=data.get("yanked"),
            annotations=dict(data.get("annotations", {})),
            parcels=[Parcel.from_dict(p) for p in data.get("parcel", [])],
            groups=[Group.from_dict(g) for g in data.get("group", [])],
        )
        for s in data.get("signature", []):
            invoice.add_signature(Signature.from_dict(s))
        return invoice


def new_parcel(name: str, media_type: str, data: bytes) -> Parcel:
    """Build a parcel whose label digest and size are computed from ``data``."""
    return Parcel(label=Label(sha256=sha256(data), media_type=media_type, name=name, size=len(data)))
