from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, Union

from .ranking import Ranking


class NodeType(str, Enum):
    ORG = "org"
    TEAM = "team"
    USER = "user"
    ARTIST = "artist"
    IP = "ip"


# ----------------------------------------------------------------------
# Attribute variants
# ----------------------------------------------------------------------


class _Attrs:
    """
    Shared behavior of the per-type attribute records.

    Declared fields are the schema of the node type; anything else a
    caller supplies lands in `extra` instead of being dropped.
    """

    extra: Dict[str, Any]

    def __post_init__(self):
        shadowed = sorted(set(self.extra) & self._declared())
        if shadowed:
            raise ValueError(f"extra keys shadow declared attrs: {shadowed}")

    @classmethod
    def _declared(cls):
        return {f.name for f in fields(cls)} - {"extra"}

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None):
        data = dict(data or {})
        known = cls._declared()

        kwargs = {k: data.pop(k) for k in list(data) if k in known}
        extra = dict(data.pop("extra", None) or {})
        extra.update(data)

        return cls(extra=extra, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten declared fields and extras; unset fields are omitted."""
        out = dict(self.extra)
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = value
        return out


@dataclass
class OrgAttrs(_Attrs):
    license: Optional[str] = None
    country: Optional[str] = None
    domain: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TeamAttrs(_Attrs):
    dept: Optional[str] = None
    kpis: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UserAttrs(_Attrs):
    email: Optional[str] = None
    title: Optional[str] = None
    personal_license: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ArtistAttrs(_Attrs):
    priority: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class IpAttrs(_Attrs):
    isrc: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


NodeAttrs = Union[OrgAttrs, TeamAttrs, UserAttrs, ArtistAttrs, IpAttrs]

ATTRS_BY_TYPE: Dict[NodeType, Type[_Attrs]] = {
    NodeType.ORG: OrgAttrs,
    NodeType.TEAM: TeamAttrs,
    NodeType.USER: UserAttrs,
    NodeType.ARTIST: ArtistAttrs,
    NodeType.IP: IpAttrs,
}


def attrs_for(type_: NodeType, data: Union[None, Mapping[str, Any], NodeAttrs] = None) -> NodeAttrs:
    """Build (or check) the attribute variant matching `type_`."""
    expected = ATTRS_BY_TYPE[NodeType(type_)]

    if isinstance(data, _Attrs):
        if not isinstance(data, expected):
            raise TypeError(
                f"{type(data).__name__} does not belong to node type '{NodeType(type_).value}'"
            )
        return data

    return expected.from_mapping(data)


# ----------------------------------------------------------------------
# Node
# ----------------------------------------------------------------------


@dataclass
class Node:
    """
    Typed entity of the context graph.

    `id`, `type` and `created_at` are fixed once the node exists.
    `name`, `attrs`, `updated_at` and the ranking inputs change as the
    session progresses; ranking changes always go through
    `ContextGraph.touch` or `Ranking.update` so the score stays derived.
    """

    id: str
    type: NodeType
    name: str
    attrs: NodeAttrs
    created_at: int
    updated_at: int
    ranking: Ranking

    _FROZEN = ("id", "type", "created_at")

    def __post_init__(self):
        object.__setattr__(self, "type", NodeType(self.type))
        object.__setattr__(self, "attrs", attrs_for(self.type, self.attrs))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._FROZEN and name in self.__dict__:
            raise AttributeError(f"Node.{name} is immutable")

        if name == "updated_at" and "created_at" in self.__dict__ and value < self.created_at:
            raise ValueError("updated_at cannot precede created_at")

        if name == "attrs":
            value = attrs_for(self.type, value)

        super().__setattr__(name, value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "attrs": self.attrs.to_dict(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "ranking": self.ranking.to_dict(),
        }
