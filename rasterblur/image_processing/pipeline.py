# -*- coding: utf-8 -*-
"""
Pipeline - Composable sequence of image transforms.

Chains multiple ``ImageTransform`` instances into a single callable
pipeline. The output of each transform feeds into the next, and progress
is reported across the whole chain.

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
2026-02-06

Modified
--------
2026-10-19
"""

# Standard library
import logging
from typing import Any, List, Sequence

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ValidationError
from rasterblur.image_processing.base import ImageTransform

logger = logging.getLogger(__name__)


class Pipeline(ImageTransform):
    """Sequential chain of image transforms.

    The pipeline is itself an ``ImageTransform`` and can be nested.

    Parameters
    ----------
    steps : Sequence[ImageTransform]
        Ordered transforms. Must contain at least one.

    Examples
    --------
    >>> from rasterblur.image_processing import Pipeline, Quantizer
    >>> from rasterblur.image_processing.filters import MedianFilter
    >>> pipe = Pipeline([MedianFilter(kernel_size=3), Quantizer()])
    >>> raster = pipe.apply(image, progress_callback=lambda f: print(f"{f:.0%}"))
    """

    __processor_version__ = '1.0.0'

    def __init__(self, steps: Sequence[ImageTransform]) -> None:
        if not steps:
            raise ValidationError("Pipeline requires at least one transform")
        for i, step in enumerate(steps):
            if not isinstance(step, ImageTransform):
                raise TypeError(
                    f"Step {i} is not an ImageTransform: {type(step).__name__}"
                )
        self._steps: List[ImageTransform] = list(steps)

    @property
    def steps(self) -> List[ImageTransform]:
        """Shallow copy of the ordered step list."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Pipeline({self._steps!r})"

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply all transforms in sequence.

        Parameters
        ----------
        source : np.ndarray
            Input image array.
        **kwargs
            Forwarded to each step's ``apply()``. ``progress_callback``
            is intercepted and rescaled so each step reports its share of
            overall progress.

        Returns
        -------
        np.ndarray
            Output of the last step.
        """
        n = len(self._steps)
        outer_cb = kwargs.pop('progress_callback', None)

        result = source
        for i, step in enumerate(self._steps):
            logger.debug("Pipeline step %d/%d: %r", i + 1, n, step)

            step_kwargs = dict(kwargs)
            if outer_cb is not None:
                step_kwargs['progress_callback'] = (
                    lambda f, _b=i / n, _s=1.0 / n: outer_cb(_b + f * _s)
                )

            result = step.apply(result, **step_kwargs)

            if outer_cb is not None:
                outer_cb((i + 1) / n)

        return result
