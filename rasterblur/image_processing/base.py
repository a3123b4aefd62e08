# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for image processors.

Defines the ``ImageProcessor`` common base class and the ``ImageTransform``
ABC for dense raster transforms. ``ImageProcessor`` provides version
checking at first instantiation and ``typing.Annotated``-based tunable
parameter declarations with runtime resolution through ``**kwargs``.
``ChannelStackMixin`` lets transforms written for ``(rows, cols,
channels)`` stacks also accept plain 2D single-channel arrays.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-01-30

Modified
--------
2026-10-19
"""

# Standard library
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.image_processing.params import ParamSpec, collect_param_specs

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: Concrete subclasses that do not declare a
    processor version via ``@processor_version('x.y.z')`` trigger a
    ``UserWarning`` at first instantiation.  The check uses ``__new__``
    rather than ``__init_subclass__`` so that decorators have been applied
    by the time the check runs.

    **Tunable parameter flow**: Subclasses declare tunable parameters as
    ``typing.Annotated`` class-body fields using constraint markers from
    :mod:`rasterblur.image_processing.params`. ``__init_subclass__``
    collects them into ``__param_specs__``. At runtime,
    ``_resolve_params(kwargs)`` merges instance values with keyword
    overrides and validates every value.
    """

    _version_warned_classes: set = set()

    #: Whether this processor uses only numpy operations (True) and could
    #: therefore run on a numpy-compatible array backend.
    __gpu_compatible__: bool = False

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _init_params(self, **values: Any) -> None:
        """Validate constructor arguments and store them as attributes.

        Parameters
        ----------
        **values
            ``{param_name: value}`` for declared params. Params that are
            not supplied fall back to their declared default.

        Raises
        ------
        ValidationError
            If a value violates its declared constraints, or a required
            param is missing.
        """
        for spec in type(self).__param_specs__:
            if spec.name in values:
                value = values[spec.name]
            elif not spec.required:
                value = spec.default
            else:
                value = None
            setattr(self, spec.name, spec.validate(value))

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with runtime *kwargs* overrides.

        For each declared parameter in ``__param_specs__`` the *kwargs*
        value wins over ``self.<name>``. Every resolved value is
        validated against its spec.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments.  Non-param keys (e.g.
            ``progress_callback``) are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        ValidationError
            If a value violates its declared constraints.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            else:
                value = getattr(self, spec.name)
            resolved[spec.name] = spec.validate(value)
        return resolved

    def _report_progress(
        self, kwargs: Dict[str, Any], fraction: float
    ) -> None:
        """Report progress to an optional ``progress_callback`` kwarg.

        No-op when the caller did not supply a callback.
        """
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))

    def __repr__(self) -> str:
        params = ', '.join(
            f"{spec.name}={getattr(self, spec.name)!r}"
            for spec in type(self).__param_specs__
        )
        return f"{type(self).__name__}({params})"


class ImageTransform(ImageProcessor):
    """
    Abstract base class for image transforms.

    Transforms take a source image array and produce a new array of the
    same spatial size. The source is never modified in place.
    """

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Apply the transform to a source image array.

        Parameters
        ----------
        source : np.ndarray
            Input image, ``(rows, cols)`` or ``(rows, cols, channels)``.

        Returns
        -------
        np.ndarray
            Transformed image.
        """
        ...


class ChannelStackMixin:
    """Mixin that lets a 3D transform accept 2D single-channel input.

    Subclasses implement ``_apply_3d()`` against ``(rows, cols,
    channels)`` arrays. A 2D ``(rows, cols)`` input is lifted to one
    channel before the call and squeezed back afterwards, so the output
    keeps the dimensionality of the input.

    Usage
    -----
    Subclasses should inherit from both the mixin and ``ImageTransform``::

        class MyFilter(ChannelStackMixin, ImageTransform):
            def _apply_3d(self, source, **kwargs):
                ...
    """

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform, handling both 2D and 3D inputs.

        Parameters
        ----------
        source : np.ndarray
            2D ``(rows, cols)`` or 3D ``(rows, cols, channels)`` array.

        Returns
        -------
        np.ndarray
            Transformed image with same dimensionality as input.
        """
        if isinstance(source, np.ndarray) and source.ndim == 2:
            return self._apply_3d(source[:, :, np.newaxis], **kwargs)[:, :, 0]
        return self._apply_3d(source, **kwargs)

    @abstractmethod
    def _apply_3d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform to a ``(rows, cols, channels)`` stack."""
        ...
