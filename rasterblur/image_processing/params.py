# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Provides constraint marker types (``Range``, ``Options``, ``Desc``) for use
inside ``typing.Annotated`` annotations, plus the ``ParamSpec``
introspection class and the collector consumed by
``ImageProcessor.__init_subclass__`` and by ``FilterConfig``.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated
    from rasterblur.image_processing.params import Range, Options, Desc

    class MyFilter(ImageTransform):
        kernel_size: Annotated[int, Range(min=1), Desc('Window size')] = 3
        rounding: Annotated[str, Options('round', 'truncate'),
                            Desc('Float to integer policy')] = 'round'

Enum-typed parameters accept either a member or its string value; the
string is coerced to the member during validation.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-10

Modified
--------
2026-10-19
"""

# Standard library
import inspect
import math
import types
from enum import Enum
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

# rasterblur internal
from rasterblur.exceptions import ValidationError


# =====================================================================
# Constraint marker types  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types.

    Any ``Annotated`` field whose metadata includes at least one
    ``ParamMeta`` instance is treated as a tunable parameter.
    """


class Range(ParamMeta):
    """Numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Minimum allowed value.
    max : int or float, optional
        Maximum allowed value (inclusive).
    min_exclusive : bool
        If True the minimum itself is rejected (``value > min``).
        Default False.
    """

    __slots__ = ('min', 'max', 'min_exclusive')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
        min_exclusive: bool = False,
    ) -> None:
        self.min = min
        self.max = max
        self.min_exclusive = min_exclusive

    def __repr__(self) -> str:
        parts = []
        if self.min is not None:
            parts.append(f"min={self.min!r}")
        if self.max is not None:
            parts.append(f"max={self.max!r}")
        if self.min_exclusive:
            parts.append("min_exclusive=True")
        return f"Range({', '.join(parts)})"


class Options(ParamMeta):
    """Discrete choice constraint.

    Parameters
    ----------
    *choices
        Allowed values.  Must supply at least one.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

_SENTINEL = object()


class ParamSpec:
    """Resolved constraints for a single tunable parameter.

    Attributes
    ----------
    name : str
        Parameter name (keyword-argument key).
    param_type : type
        Expected Python type (``float``, ``int``, ``str``, an ``Enum``).
    default : Any
        Default value, or None if the parameter is required.
    nullable : bool
        Whether ``None`` is an accepted value (``Optional[...]`` hint).
    description : str
        Human-readable description.
    min_value, max_value : int, float, or None
        Bounds from ``Range``.
    min_exclusive : bool
        Whether ``min_value`` itself is rejected.
    choices : tuple or None
        Allowed values (from ``Options``).
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default', 'nullable',
        'description', 'min_value', 'max_value', 'min_exclusive', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str,
        min_value: Optional[Union[int, float]],
        max_value: Optional[Union[int, float]],
        choices: Optional[Tuple],
        min_exclusive: bool = False,
        nullable: bool = False,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.nullable = nullable
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.min_exclusive = min_exclusive
        self.choices = choices

    @property
    def required(self) -> bool:
        """Whether this parameter is required (has no default)."""
        return not self._has_default

    def validate(self, value: Any) -> Any:
        """Validate *value* and return it in canonical form.

        * ``int`` is accepted when ``param_type`` is ``float``; ``bool``
          is never accepted as a number.
        * Floats must be finite.
        * Strings are coerced to members when ``param_type`` is an
          ``Enum`` subclass.

        Returns
        -------
        Any
            The validated value (enum-coerced where applicable).

        Raises
        ------
        ValidationError
            If *value* has the wrong type, is out of range, or is not
            among the allowed choices.
        """
        if value is None:
            if self.nullable:
                return None
            raise ValidationError(f"Parameter '{self.name}' is required")

        value = self._check_type(value)

        if self.min_value is not None:
            if self.min_exclusive and value <= self.min_value:
                raise ValidationError(
                    f"Parameter '{self.name}' value {value!r} "
                    f"must be greater than {self.min_value!r}"
                )
            if value < self.min_value:
                raise ValidationError(
                    f"Parameter '{self.name}' value {value!r} "
                    f"is below minimum {self.min_value!r}"
                )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )

        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )
        return value

    def _check_type(self, value: Any) -> Any:
        ptype = self.param_type
        if isinstance(ptype, type) and issubclass(ptype, Enum):
            if isinstance(value, ptype):
                return value
            try:
                return ptype(value)
            except ValueError:
                valid = ', '.join(m.value for m in ptype)
                raise ValidationError(
                    f"Parameter '{self.name}' value {value!r} is not "
                    f"valid (valid: {valid})"
                ) from None
        if ptype in (int, float) and isinstance(value, bool):
            raise ValidationError(
                f"Parameter '{self.name}' must be {ptype.__name__}, "
                f"got bool"
            )
        if ptype is float:
            if not isinstance(value, (int, float)):
                raise ValidationError(
                    f"Parameter '{self.name}' must be float, "
                    f"got {type(value).__name__}"
                )
            if not math.isfinite(value):
                raise ValidationError(
                    f"Parameter '{self.name}' must be finite, got {value!r}"
                )
            return value
        if ptype is not object and not isinstance(value, ptype):
            raise ValidationError(
                f"Parameter '{self.name}' must be {ptype.__name__}, "
                f"got {type(value).__name__}"
            )
        return value

    def __repr__(self) -> str:
        parts = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            parts += f", default={self.default!r}"
        if self.min_value is not None:
            parts += f", min_value={self.min_value!r}"
        if self.max_value is not None:
            parts += f", max_value={self.max_value!r}"
        if self.choices is not None:
            parts += f", choices={self.choices!r}"
        return parts + ")"


# =====================================================================
# Annotation collection
# =====================================================================

def _unwrap_optional(hint: Any) -> Tuple[Any, bool]:
    """Return ``(inner_type, nullable)`` for ``Optional[X]`` hints."""
    if get_origin(hint) in (Union, types.UnionType):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0], True
    return hint, False


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` type hints on *cls* into a tuple of ``ParamSpec``.

    Only fields whose ``Annotated`` metadata includes at least one
    ``ParamMeta`` instance are collected, ordered parent-first.

    Raises
    ------
    TypeError
        If a field has both ``Range`` and ``Options`` constraints.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except Exception:
        return ()

    seen: set = set()
    ordered_names: list = []
    for klass in reversed(cls.__mro__):
        for name in inspect.get_annotations(klass):
            if name not in seen and name in hints:
                seen.add(name)
                ordered_names.append(name)

    specs: list = []
    for name in ordered_names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue

        base_type, nullable = _unwrap_optional(hint.__args__[0])
        param_metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not param_metas:
            continue

        range_meta: Optional[Range] = None
        options_meta: Optional[Options] = None
        desc_meta: Optional[Desc] = None
        for m in param_metas:
            if isinstance(m, Range):
                range_meta = m
            elif isinstance(m, Options):
                options_meta = m
            elif isinstance(m, Desc):
                desc_meta = m

        if range_meta and options_meta:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        default = getattr(cls, name, _SENTINEL)
        has_default = default is not _SENTINEL

        specs.append(ParamSpec(
            name=name,
            param_type=base_type,
            default=default if has_default else None,
            has_default=has_default,
            description=desc_meta.text if desc_meta else '',
            min_value=range_meta.min if range_meta else None,
            max_value=range_meta.max if range_meta else None,
            min_exclusive=range_meta.min_exclusive if range_meta else False,
            choices=options_meta.choices if options_meta else None,
            nullable=nullable,
        ))

    return tuple(specs)
