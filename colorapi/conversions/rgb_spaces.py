"""
RGB color spaces <-> XYZ.

Each RGB space is a transfer function (gamma encoded <-> linear light) plus a
matrix to XYZ. The transfer functions are vectorized and extend to negative
values by mirroring, so out-of-gamut colors survive a round trip.
"""
import numpy as np
from numpy import ndarray as NDArray

from . import matrices as m

Triple = tuple[float, float, float]


## Transfer functions

def np_srgb_to_linear(c: NDArray) -> NDArray:
    """sRGB (and Display P3) gamma encoded -> linear light."""
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(a <= 0.04045, c / 12.92, np.sign(c) * ((a + 0.055) / 1.055) ** 2.4)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(a > 0.0031308, np.sign(c) * (1.055 * a ** (1 / 2.4) - 0.055), 12.92 * c)


def np_a98_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    return np.sign(c) * np.abs(c) ** (563 / 256)


def np_linear_to_a98(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    return np.sign(c) * np.abs(c) ** (256 / 563)


def np_prophoto_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(a <= 16 / 512, c / 16, np.sign(c) * a ** 1.8)


def np_linear_to_prophoto(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(a >= 1 / 512, np.sign(c) * a ** (1 / 1.8), 16 * c)


_REC2020_ALPHA = 1.09929682680944
_REC2020_BETA = 0.018053968510807


def np_rec2020_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(
        a < _REC2020_BETA * 4.5,
        c / 4.5,
        np.sign(c) * ((a + _REC2020_ALPHA - 1) / _REC2020_ALPHA) ** (1 / 0.45),
    )


def np_linear_to_rec2020(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(
        a > _REC2020_BETA,
        np.sign(c) * (_REC2020_ALPHA * a ** 0.45 - (_REC2020_ALPHA - 1)),
        4.5 * c,
    )


def _triple(values: NDArray) -> Triple:
    return float(values[0]), float(values[1]), float(values[2])


## Scalar wrappers used by the space registry

def srgb_to_linear(r: float, g: float, b: float) -> Triple:
    return _triple(np_srgb_to_linear([r, g, b]))


def linear_to_srgb(r: float, g: float, b: float) -> Triple:
    return _triple(np_linear_to_srgb([r, g, b]))


def linear_srgb_to_xyz(r: float, g: float, b: float) -> Triple:
    return m.apply(m.LIN_SRGB_TO_XYZ, (r, g, b))


def xyz_to_linear_srgb(x: float, y: float, z: float) -> Triple:
    return m.apply(m.XYZ_TO_LIN_SRGB, (x, y, z))


def p3_to_xyz(r: float, g: float, b: float) -> Triple:
    return m.apply(m.LIN_P3_TO_XYZ, np_srgb_to_linear([r, g, b]))


def xyz_to_p3(x: float, y: float, z: float) -> Triple:
    return _triple(np_linear_to_srgb(m.XYZ_TO_LIN_P3 @ np.array([x, y, z], dtype=float)))


def a98_to_xyz(r: float, g: float, b: float) -> Triple:
    return m.apply(m.LIN_A98_TO_XYZ, np_a98_to_linear([r, g, b]))


def xyz_to_a98(x: float, y: float, z: float) -> Triple:
    return _triple(np_linear_to_a98(m.XYZ_TO_LIN_A98 @ np.array([x, y, z], dtype=float)))


def prophoto_to_xyz_d50(r: float, g: float, b: float) -> Triple:
    return m.apply(m.LIN_PROPHOTO_TO_XYZ_D50, np_prophoto_to_linear([r, g, b]))


def xyz_d50_to_prophoto(x: float, y: float, z: float) -> Triple:
    return _triple(np_linear_to_prophoto(m.XYZ_D50_TO_LIN_PROPHOTO @ np.array([x, y, z], dtype=float)))


def rec2020_to_xyz(r: float, g: float, b: float) -> Triple:
    return m.apply(m.LIN_REC2020_TO_XYZ, np_rec2020_to_linear([r, g, b]))


def xyz_to_rec2020(x: float, y: float, z: float) -> Triple:
    return _triple(np_linear_to_rec2020(m.XYZ_TO_LIN_REC2020 @ np.array([x, y, z], dtype=float)))


def xyz_d65_to_d50(x: float, y: float, z: float) -> Triple:
    return m.apply(m.D65_TO_D50, (x, y, z))


def xyz_d50_to_d65(x: float, y: float, z: float) -> Triple:
    return m.apply(m.D50_TO_D65, (x, y, z))
