# -*- coding: utf-8 -*-
"""
Annotated Tunable Parameter Tests.

Tests for the typing.Annotated-based tunable parameter system: constraint
markers (Range, Options, Desc), ParamSpec validation and enum coercion,
__init_subclass__ annotation collection, _init_params construction,
_resolve_params runtime resolution, and inheritance.

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

from typing import Annotated, Optional

import numpy as np
import pytest

from rasterblur.exceptions import ValidationError
from rasterblur.image_processing.base import ImageTransform
from rasterblur.image_processing.params import (
    Desc,
    Options,
    ParamMeta,
    ParamSpec,
    Range,
    collect_param_specs,
)
from rasterblur.image_processing.versioning import processor_version
from rasterblur.vocabulary import MotionDirection


# ---------------------------------------------------------------------------
# Constraint marker construction
# ---------------------------------------------------------------------------

class TestRange:
    """Test Range constraint marker."""

    def test_basic(self):
        r = Range(min=0.0, max=1.0)
        assert r.min == 0.0
        assert r.max == 1.0
        assert r.min_exclusive is False

    def test_defaults_none(self):
        r = Range()
        assert r.min is None
        assert r.max is None

    def test_is_param_meta(self):
        assert isinstance(Range(), ParamMeta)

    def test_repr(self):
        assert repr(Range(min=0, min_exclusive=True)) == (
            "Range(min=0, min_exclusive=True)"
        )


class TestOptions:
    """Test Options constraint marker."""

    def test_basic(self):
        assert Options('a', 'b').choices == ('a', 'b')

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="at least one"):
            Options()


class TestDesc:
    """Test Desc constraint marker."""

    def test_basic(self):
        d = Desc('A description')
        assert d.text == 'A description'
        assert isinstance(d, ParamMeta)


# ---------------------------------------------------------------------------
# ParamSpec validation
# ---------------------------------------------------------------------------

def _spec(param_type, **kw):
    base = dict(
        name='p', param_type=param_type, default=None, has_default=False,
        description='', min_value=None, max_value=None, choices=None,
    )
    base.update(kw)
    return ParamSpec(**base)


class TestParamSpec:
    """Test ParamSpec.validate."""

    def test_required_flag(self):
        assert _spec(int).required is True
        assert _spec(int, has_default=True, default=3).required is False

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="'p' is required"):
            _spec(int).validate(None)

    def test_none_accepted_when_nullable(self):
        assert _spec(int, nullable=True).validate(None) is None

    def test_int_accepted_for_float(self):
        assert _spec(float).validate(2) == 2

    def test_bool_rejected_for_int(self):
        with pytest.raises(ValidationError, match="bool"):
            _spec(int).validate(True)

    def test_string_rejected_for_int(self):
        with pytest.raises(ValidationError, match="must be int"):
            _spec(int).validate('3')

    @pytest.mark.parametrize("value", [float('nan'), float('inf')])
    def test_non_finite_float_rejected(self, value):
        with pytest.raises(ValidationError, match="finite"):
            _spec(float).validate(value)

    def test_min_inclusive(self):
        spec = _spec(int, min_value=1)
        assert spec.validate(1) == 1
        with pytest.raises(ValidationError, match="below minimum"):
            spec.validate(0)

    def test_min_exclusive(self):
        spec = _spec(float, min_value=0.0, min_exclusive=True)
        assert spec.validate(1e-9) == 1e-9
        with pytest.raises(ValidationError, match="greater than"):
            spec.validate(0.0)

    def test_max(self):
        with pytest.raises(ValidationError, match="above maximum"):
            _spec(int, max_value=5).validate(6)

    def test_choices(self):
        spec = _spec(str, choices=('round', 'truncate'))
        assert spec.validate('truncate') == 'truncate'
        with pytest.raises(ValidationError, match="allowed choices"):
            spec.validate('ceil')

    def test_enum_member_passthrough(self):
        spec = _spec(MotionDirection)
        assert spec.validate(MotionDirection.VERTICAL) is (
            MotionDirection.VERTICAL
        )

    def test_enum_coerced_from_string(self):
        spec = _spec(MotionDirection)
        assert spec.validate('diagonal') is MotionDirection.DIAGONAL

    def test_enum_invalid_lists_valid_values(self):
        with pytest.raises(ValidationError,
                           match="valid: vertical, horizontal, diagonal"):
            _spec(MotionDirection).validate('up')


# ---------------------------------------------------------------------------
# Annotation collection
# ---------------------------------------------------------------------------

class TestCollectParamSpecs:
    """Test collect_param_specs on plain classes."""

    def test_collects_annotated_only(self):
        class _C:
            a: Annotated[int, Range(min=1), Desc('side')] = 3
            b: int = 4
            c: Annotated[str, 'not a marker'] = 'x'

        specs = collect_param_specs(_C)
        assert [s.name for s in specs] == ['a']
        assert specs[0].description == 'side'
        assert specs[0].default == 3

    def test_optional_is_nullable(self):
        class _C:
            d: Annotated[Optional[MotionDirection], Desc('dir')] = None

        spec, = collect_param_specs(_C)
        assert spec.param_type is MotionDirection
        assert spec.nullable is True

    def test_missing_default_is_required(self):
        class _C:
            d: Annotated[MotionDirection, Desc('dir')]

        spec, = collect_param_specs(_C)
        assert spec.required is True

    def test_range_and_options_conflict(self):
        class _C:
            x: Annotated[int, Range(min=0), Options(1, 2)] = 1

        with pytest.raises(TypeError, match="mutually exclusive"):
            collect_param_specs(_C)

    def test_parent_first_order(self):
        class _Parent:
            a: Annotated[int, Range(min=0)] = 1

        class _Child(_Parent):
            b: Annotated[float, Range(min=0.0)] = 2.0

        assert [s.name for s in collect_param_specs(_Child)] == ['a', 'b']


# ---------------------------------------------------------------------------
# ImageProcessor integration
# ---------------------------------------------------------------------------

@processor_version('1.0.0')
class _Scale(ImageTransform):
    factor: Annotated[float, Range(min=0.0, min_exclusive=True),
                      Desc('Multiplier')] = 1.0
    mode: Annotated[str, Options('fast', 'exact')] = 'fast'

    def __init__(self, factor=1.0, mode='fast'):
        self._init_params(factor=factor, mode=mode)

    def apply(self, source, **kwargs):
        params = self._resolve_params(kwargs)
        return source * params['factor']


class TestProcessorParams:
    """Test __init_subclass__, _init_params and _resolve_params."""

    def test_specs_collected(self):
        assert [s.name for s in _Scale.__param_specs__] == ['factor', 'mode']

    def test_init_stores_values(self):
        p = _Scale(factor=2.0, mode='exact')
        assert p.factor == 2.0
        assert p.mode == 'exact'

    def test_init_validates(self):
        with pytest.raises(ValidationError, match="factor"):
            _Scale(factor=-1.0)
        with pytest.raises(ValidationError, match="mode"):
            _Scale(mode='slow')

    def test_runtime_override(self):
        p = _Scale(factor=2.0)
        out = p.apply(np.ones(3), factor=3.0)
        np.testing.assert_array_equal(out, 3.0)
        assert p.factor == 2.0

    def test_runtime_override_validated(self):
        with pytest.raises(ValidationError, match="factor"):
            _Scale().apply(np.ones(3), factor=0.0)

    def test_non_param_kwargs_ignored(self):
        out = _Scale(factor=2.0).apply(np.ones(2), progress_callback=None)
        np.testing.assert_array_equal(out, 2.0)

    def test_repr(self):
        assert repr(_Scale(factor=2.0)) == "_Scale(factor=2.0, mode='fast')"

    def test_inherited_specs(self):
        @processor_version('1.0.0')
        class _Shifted(_Scale):
            offset: Annotated[float, Range(min=0.0)] = 0.0

            def __init__(self, factor=1.0, mode='fast', offset=0.0):
                self._init_params(factor=factor, mode=mode, offset=offset)

        names = [s.name for s in _Shifted.__param_specs__]
        assert names == ['factor', 'mode', 'offset']
        assert _Shifted(offset=1.5).offset == 1.5

    def test_missing_required_raises(self):
        @processor_version('1.0.0')
        class _Needs(ImageTransform):
            direction: Annotated[MotionDirection, Desc('dir')]

            def __init__(self, **kw):
                self._init_params(**kw)

            def apply(self, source, **kwargs):
                return source

        with pytest.raises(ValidationError, match="'direction' is required"):
            _Needs()
        assert _Needs(direction='vertical').direction is (
            MotionDirection.VERTICAL
        )
