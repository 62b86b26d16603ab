"""CIE Lab (D50) <-> XYZ D50."""
import numpy as np

from .matrices import D50

Triple = tuple[float, float, float]

KAPPA = 24389 / 27   # 29^3/3^3
EPSILON = 216 / 24389  # 6^3/29^3


def xyz_d50_to_lab(x: float, y: float, z: float) -> Triple:
    scaled = np.array([x, y, z], dtype=float) / D50
    f = np.where(scaled > EPSILON, np.cbrt(scaled), (KAPPA * scaled + 16) / 116)
    l = 116 * f[1] - 16
    a = 500 * (f[0] - f[1])
    b = 200 * (f[1] - f[2])
    return float(l), float(a), float(b)


def lab_to_xyz_d50(l: float, a: float, b: float) -> Triple:
    f1 = (l + 16) / 116
    f0 = a / 500 + f1
    f2 = f1 - b / 200

    x = f0 ** 3 if f0 ** 3 > EPSILON else (116 * f0 - 16) / KAPPA
    y = ((l + 16) / 116) ** 3 if l > KAPPA * EPSILON else l / KAPPA
    z = f2 ** 3 if f2 ** 3 > EPSILON else (116 * f2 - 16) / KAPPA

    return float(x * D50[0]), float(y * D50[1]), float(z * D50[2])
