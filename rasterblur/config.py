# -*- coding: utf-8 -*-
"""
Filter Configuration - Validated, immutable filter selection.

``FilterConfig`` gathers every option the engine understands: which
algorithm to run and its numeric parameters. Fields are declared with the
same ``Annotated`` constraint markers that processors use, so a config is
checked by the same ``ParamSpec`` rules and fails at construction, before
any image is touched.

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
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from dataclasses import dataclass, fields
from typing import Annotated, Any, Mapping, Optional

# rasterblur internal
from rasterblur.exceptions import ValidationError
from rasterblur.image_processing.params import Desc, Range, collect_param_specs
from rasterblur.vocabulary import FilterAlgorithm, MotionDirection

DEFAULT_ALGORITHM = FilterAlgorithm.GAUSSIAN
DEFAULT_STRENGTH = 3
DEFAULT_SIGMA_RANGE = 50.0
DEFAULT_SIGMA_SPACE = 2.0


@dataclass(frozen=True)
class FilterConfig:
    """Algorithm selection and parameters for one filtering run.

    Strings are accepted for the enum fields and coerced to members.

    Parameters
    ----------
    algorithm : FilterAlgorithm or str
        Filter family. Default ``gaussian``.
    strength : int
        Kernel or window side length, >= 1. Default 3.
    sigma_range : float
        Bilateral intensity standard deviation, > 0. Default 50.0.
    sigma_space : float
        Bilateral spatial standard deviation, > 0. Default 2.0.
    motion_direction : MotionDirection or str, optional
        Required when ``algorithm`` is ``motion``. Ignored, and stored as
        None, for every other algorithm.

    Raises
    ------
    ValidationError
        If any field is out of range or of the wrong type, or a motion
        blur is requested without a direction.

    Examples
    --------
    >>> FilterConfig(algorithm='motion', strength=9,
    ...              motion_direction='horizontal')
    """

    algorithm: Annotated[FilterAlgorithm,
                         Desc('Filter family')] = DEFAULT_ALGORITHM
    strength: Annotated[int, Range(min=1),
                        Desc('Kernel or window side length')] = DEFAULT_STRENGTH
    sigma_range: Annotated[float, Range(min=0.0, min_exclusive=True),
                           Desc('Bilateral intensity sigma')] = DEFAULT_SIGMA_RANGE
    sigma_space: Annotated[float, Range(min=0.0, min_exclusive=True),
                           Desc('Bilateral spatial sigma')] = DEFAULT_SIGMA_SPACE
    motion_direction: Annotated[Optional[MotionDirection],
                                Desc('Motion blur direction')] = None

    def __post_init__(self) -> None:
        for spec in collect_param_specs(type(self)):
            if (spec.name == 'motion_direction'
                    and self.algorithm is not FilterAlgorithm.MOTION):
                # Only read for motion blur; any other value is dropped.
                object.__setattr__(self, spec.name, None)
                continue
            value = spec.validate(getattr(self, spec.name))
            object.__setattr__(self, spec.name, value)

        if (self.algorithm is FilterAlgorithm.MOTION
                and self.motion_direction is None):
            valid = ', '.join(m.value for m in MotionDirection)
            raise ValidationError(
                f"Parameter 'motion_direction' is required for motion "
                f"blur (valid: {valid})"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> 'FilterConfig':
        """Build a config from loose keys, skipping ``None`` values.

        Keys that are not config fields are ignored, so an
        ``argparse.Namespace`` converted with ``vars()`` can be passed
        directly.
        """
        names = {f.name for f in fields(cls)}
        kwargs = {
            key: value for key, value in values.items()
            if key in names and value is not None
        }
        return cls(**kwargs)
