"""Coordinate validation with three error-reporting styles, and error chains."""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_ROOT_ERROR_MESSAGE = "fun1 root error"


@dataclass(frozen=True)
class Route:
    """A route between two points."""


class CoordinateError(ValueError):
    """A latitude or longitude is out of range."""


class RouteValidationError(ValueError):
    """One end of a route failed validation; the cause holds the details."""


class ChainError(Exception):
    """An error whose message includes the messages of its causes."""

    def __str__(self) -> str:
        message = super().__str__()
        if self.__cause__ is not None:
            return f"{message}: {self.__cause__}"
        return message


def _as_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def validate_coordinates(lat: float, lng: float) -> None:
    """Raise CoordinateError if ``lat`` is outside ±90 or ``lng`` outside ±180."""
    lat, lng = _as_float32(lat), _as_float32(lng)
    if lat > 90.0 or lat < -90.0:
        raise CoordinateError(f"invalid latitude: {lat:f}")
    if lng > 180.0 or lng < -180.0:
        raise CoordinateError(f"invalid longitude: {lng:f}")


def _route(src_lat: float, src_lng: float, dst_lat: float, dst_lng: float) -> Route:
    return Route()


def get_route_logged(
    src_lat: float, src_lng: float, dst_lat: float, dst_lng: float
) -> Route:
    """Validate both ends, logging every failure before re-raising it."""
    for lat, lng, end in ((src_lat, src_lng, "source"), (dst_lat, dst_lng, "target")):
        try:
            validate_coordinates(lat, lng)
        except CoordinateError as err:
            logger.error("%s", err)
            logger.error("failed to validate %s coordinates", end)
            raise
    return _route(src_lat, src_lng, dst_lat, dst_lng)


def get_route_plain(
    src_lat: float, src_lng: float, dst_lat: float, dst_lng: float
) -> Route:
    """Validate both ends, letting a CoordinateError pass unchanged."""
    validate_coordinates(src_lat, src_lng)
    validate_coordinates(dst_lat, dst_lng)
    return _route(src_lat, src_lng, dst_lat, dst_lng)


def get_route(src_lat: float, src_lng: float, dst_lat: float, dst_lng: float) -> Route:
    """Validate both ends, raising RouteValidationError that names the bad end."""
    for lat, lng, end in ((src_lat, src_lng, "source"), (dst_lat, dst_lng, "target")):
        try:
            validate_coordinates(lat, lng)
        except CoordinateError as err:
            raise RouteValidationError(
                f"failed to validate {end} coordinates: {err}"
            ) from err
    return _route(src_lat, src_lng, dst_lat, dst_lng)


def root_cause(err: BaseException) -> BaseException:
    """Follow the chain of causes of ``err`` to the original error."""
    while err.__cause__ is not None:
        err = err.__cause__
    return err


def func1() -> None:
    """Raise the root error of the chain, with no cause behind it."""
    root = ChainError(_ROOT_ERROR_MESSAGE)
    root.__cause__ = None
    raise root


def func2() -> None:
    """Call func1, wrapping its error with context."""
    try:
        func1()
    except ChainError as err:
        raise ChainError("func2 call func1 error") from err
    print("i am func2")


def func3() -> None:
    """Call func2, wrapping its error with context."""
    try:
        func2()
    except ChainError as err:
        raise ChainError("fun3 call func2 error") from err
    print("i am func3")


def main(argv: list[str] | None = None) -> int:
    """Run the call chain and log the root cause and trace of any failure."""
    logging.basicConfig(level=logging.INFO)
    try:
        func3()
    except ChainError as err:
        cause = root_cause(err)
        logger.error("original error: %s %s", type(cause).__name__, cause)
        logger.error("stack trace: %s", err, exc_info=err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())