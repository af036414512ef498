# bugcount/members.py

"""
Value objects for class members (fields and methods) referenced by findings.

A member's identity is (class_name, name, signature). Access flags are carried
along but ignored by equality, ordering and hashing, so the same declaration
compiled with different modifiers is still the same member.

Equality requires the exact same class: a FieldMember never equals a
MethodMember, even with identical identity fields. Ordering is total across
variants: members of different variants sort by VARIANT_RANK first.

Names and signatures compare by Unicode code point. JVM tools compare UTF-16
code units instead, so names containing characters outside the Basic
Multilingual Plane can sort differently here than in a Java tool.
"""

from typing import Mapping, Optional

from bugcount.utils.xml_utils import local_name

# JVM access flags (Java Virtual Machine Specification, table 4.5)
ACC_PUBLIC = 0x0001
ACC_STATIC = 0x0008
ACC_FINAL = 0x0010

# Type descriptor prefixes for object and array types
_REFERENCE_PREFIXES = ("L", "[")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


class PackageMember:
    __slots__ = ("_class_name", "_name", "_signature", "_access_flags", "_hash", "_hash_computed")

    def __init__(self, class_name: str, name: str, signature: str, access_flags: int = 0):
        if type(self) is PackageMember:
            raise TypeError("PackageMember is abstract; use FieldMember or MethodMember")
        object.__setattr__(self, "_class_name", class_name)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_signature", signature)
        object.__setattr__(self, "_access_flags", access_flags)
        object.__setattr__(self, "_hash", 0)
        object.__setattr__(self, "_hash_computed", False)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def name(self) -> str:
        return self._name

    @property
    def signature(self) -> str:
        return self._signature

    @property
    def access_flags(self) -> int:
        return self._access_flags

    def is_reference_type(self) -> bool:
        return self._signature.startswith(_REFERENCE_PREFIXES)

    def is_final(self) -> bool:
        return (self._access_flags & ACC_FINAL) != 0

    def is_public(self) -> bool:
        return (self._access_flags & ACC_PUBLIC) != 0

    def is_static(self) -> bool:
        return (self._access_flags & ACC_STATIC) != 0

    def compare_to(self, other: "PackageMember") -> int:
        """
        Return a negative, zero or positive int as self sorts before, with or
        after `other`.
        """
        if type(self) is not type(other):
            return _cmp(_variant_key(type(self)), _variant_key(type(other)))
        return (
            _cmp(self._class_name, other._class_name)
            or _cmp(self._name, other._name)
            or _cmp(self._signature, other._signature)
        )

    def __eq__(self, other):
        if type(self) is not type(other):
            return False if isinstance(other, PackageMember) else NotImplemented
        return (
            self._class_name == other._class_name
            and self._name == other._name
            and self._signature == other._signature
        )

    def __hash__(self):
        if not self._hash_computed:
            object.__setattr__(self, "_hash", hash((self._class_name, self._name, self._signature)))
            object.__setattr__(self, "_hash_computed", True)
        return self._hash

    def __lt__(self, other):
        if not isinstance(other, PackageMember):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, PackageMember):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, PackageMember):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, PackageMember):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self):
        return f"{self._class_name}.{self._name}"

    def __repr__(self):
        return (
            f"{type(self).__name__}({self._class_name!r}, {self._name!r}, "
            f"{self._signature!r}, access_flags=0x{self._access_flags:04x})"
        )


class FieldMember(PackageMember):
    __slots__ = ()


class MethodMember(PackageMember):
    __slots__ = ()


VARIANT_RANK = {
    FieldMember: 0,
    MethodMember: 1,
}


def _variant_key(cls):
    # Classes outside the table sort after it, by qualified name
    rank = VARIANT_RANK.get(cls, len(VARIANT_RANK))
    return rank, f"{cls.__module__}.{cls.__qualname__}"


_ELEMENT_VARIANTS = {
    "Field": FieldMember,
    "Method": MethodMember,
}


def member_from_element(tag: str, attrib: Mapping[str, str]) -> Optional[PackageMember]:
    """
    Build a member from the attributes of a <Field> or <Method> element of a
    bug collection. Returns None for any other tag.

    Raises ValueError if `classname`, `name` or `signature` is missing.
    """
    cls = _ELEMENT_VARIANTS.get(local_name(tag))
    if cls is None:
        return None
    missing = [key for key in ("classname", "name", "signature") if attrib.get(key) is None]
    if missing:
        raise ValueError(f"<{tag}> element missing attribute(s): {', '.join(missing)}")
    access_flags = ACC_STATIC if attrib.get("isStatic") == "true" else 0
    return cls(attrib["classname"], attrib["name"], attrib["signature"], access_flags)
