# -*- coding: utf-8 -*-
"""Transformation context.

A :class:`TransformContext` owns everything a conversion needs: the working
datum and ellipsoid, a ``pyproj.Geod`` bound to that ellipsoid and the table
of datum transformation parameters. Contexts are independent of each other;
mutation of a single context is serialized by a re-entrant lock.

Example:
    with TransformContext() as ctx:
        utm = geodetic_to_utm(ctx, GeoCoord(latitude=31.23, longitude=121.47))
"""

from __future__ import annotations

import logging
import math
import threading
from typing import TYPE_CHECKING

from pyproj import Geod

from geodatum_lib.datum import DatumTransformTable
from geodatum_lib.ellipsoid import ellipsoid_for
from geodatum_lib.enums import Datum
from geodatum_lib.errors import GeodatumError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.models import DatumTransform
from geodatum_lib.models import Ellipsoid

if TYPE_CHECKING:
    from types import TracebackType

    from geodatum_lib.errors import ErrorObserver

logger = logging.getLogger(__name__)


class TransformContext:
    """Working state for coordinate conversions.

    Args:
        datum: Working datum; selects the working ellipsoid
        observer: Optional callable notified of every error before it is raised
        seed_defaults: Pre-load the published datum parameter sets

    Attributes:
        datum: Working datum
        ellipsoid: Working ellipsoid
        observer: Error observer, if any
    """

    def __init__(
        self,
        datum: str | Datum = Datum.WGS_1984,
        *,
        observer: ErrorObserver | None = None,
        seed_defaults: bool = True,
    ) -> None:
        self.observer = observer
        self._lock = threading.RLock()
        self._closed = False
        self._transforms = DatumTransformTable()

        try:
            self.datum = Datum.normalize(datum) or Datum.WGS_1984
        except ValueError as e:
            raise self.report(InvalidInputError, str(e)) from e

        self.ellipsoid: Ellipsoid = ellipsoid_for(self.datum)
        self._geod: Geod | None = self._make_geod()

        if seed_defaults:
            self._transforms.seed_defaults()

        logger.debug(
            "Created context: datum=%s ellipsoid=%s",
            self.datum.value,
            self.ellipsoid.name,
        )

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return (
            f"TransformContext(datum={self.datum.value!r}, "
            f"ellipsoid={self.ellipsoid.name!r}, {state})"
        )

    def __enter__(self) -> TransformContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Error reporting
    # -------------------------------------------------------------------------

    def report(
        self, error_cls: type[GeodatumError], message: str | None = None
    ) -> GeodatumError:
        """Build an error, notify the observer and return it for raising.

        Usage: ``raise ctx.report(InvalidInputError, "...")``
        """
        error = error_cls(message)
        logger.debug("%s: %s", error.code.value, error.message)
        if self.observer is not None:
            self.observer(error.code, error.message)
        return error

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def lock(self) -> threading.RLock:
        """Re-entrant lock serializing mutation of this context."""
        return self._lock

    @property
    def geod(self) -> Geod:
        """Geodesic solver bound to the working ellipsoid.

        Raises:
            InvalidInputError: If the context has been closed
        """
        self.ensure_open()
        return self._geod

    @property
    def transforms(self) -> DatumTransformTable:
        self.ensure_open()
        return self._transforms

    def ensure_open(self) -> None:
        """Raise if the context has been closed."""
        if self._closed:
            raise self.report(InvalidInputError, "Context has been closed")

    def _make_geod(self) -> Geod:
        return Geod(a=self.ellipsoid.a, f=self.ellipsoid.f)

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def set_datum(self, datum: str | Datum) -> None:
        """Switch the working datum and its ellipsoid.

        Raises:
            InvalidInputError: If the datum is unknown or the context is closed
        """
        with self._lock:
            self.ensure_open()
            try:
                new_datum = Datum.normalize(datum)
            except ValueError as e:
                raise self.report(InvalidInputError, str(e)) from e
            if new_datum is None:
                raise self.report(InvalidInputError, "Datum is required")

            self.datum = new_datum
            self.ellipsoid = ellipsoid_for(new_datum)
            self._geod = self._make_geod()
            logger.debug(
                "Working datum set to %s (%s)",
                self.datum.value,
                self.ellipsoid.name,
            )

    def set_custom_ellipsoid(self, a: float, f: float) -> None:
        """Replace the working ellipsoid with a custom one.

        Args:
            a: Semi-major axis in meters (must be positive)
            f: Flattening (must satisfy ``0 < f < 1``)

        Raises:
            InvalidInputError: If the axes are invalid or the context is closed
        """
        with self._lock:
            self.ensure_open()
            if not (math.isfinite(a) and a > 0.0):
                raise self.report(
                    InvalidInputError, f"Semi-major axis must be positive: {a}"
                )
            if not (math.isfinite(f) and 0.0 < f < 1.0):
                raise self.report(
                    InvalidInputError, f"Flattening must be in (0, 1): {f}"
                )

            self.ellipsoid = Ellipsoid.from_axes(a, f, "Custom")
            self._geod = self._make_geod()
            logger.debug("Custom ellipsoid set: a=%s f=%s", a, f)

    def set_transform_params(
        self,
        from_datum: str | Datum,
        to_datum: str | Datum,
        params: DatumTransform,
    ) -> None:
        """Store parameters for ``from -> to`` and derive ``to -> from``.

        Raises:
            InvalidInputError: If a datum is unknown, both datums are the
                same, or the context is closed
        """
        with self._lock:
            self.ensure_open()
            src, dst = self._datum_pair(from_datum, to_datum)
            try:
                self._transforms.set(src, dst, params)
            except InvalidInputError as e:
                raise self.report(InvalidInputError, e.message) from e

    def get_transform_params(
        self, from_datum: str | Datum, to_datum: str | Datum
    ) -> DatumTransform:
        """Return the stored parameters, or identity when the pair is unset."""
        self.ensure_open()
        src, dst = self._datum_pair(from_datum, to_datum)
        return self._transforms.get(src, dst)

    def _datum_pair(
        self, from_datum: str | Datum, to_datum: str | Datum
    ) -> tuple[Datum, Datum]:
        try:
            src = Datum.normalize(from_datum)
            dst = Datum.normalize(to_datum)
        except ValueError as e:
            raise self.report(InvalidInputError, str(e)) from e
        if src is None or dst is None:
            raise self.report(InvalidInputError, "Both datums are required")
        return src, dst

    def close(self) -> None:
        """Release the geodesic handle. Further use raises an error."""
        with self._lock:
            if self._closed:
                return
            self._geod = None
            self._closed = True
            logger.debug("Closed context for datum %s", self.datum.value)
