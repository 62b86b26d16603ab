"""OKLab <-> XYZ D65."""
import numpy as np

from . import matrices as m

Triple = tuple[float, float, float]


def xyz_to_oklab(x: float, y: float, z: float) -> Triple:
    lms = np.cbrt(m.XYZ_TO_LMS @ np.array([x, y, z], dtype=float))
    return m.apply(m.LMS_TO_OKLAB, lms)


def oklab_to_xyz(l: float, a: float, b: float) -> Triple:
    lms = (m.OKLAB_TO_LMS @ np.array([l, a, b], dtype=float)) ** 3
    return m.apply(m.LMS_TO_XYZ, lms)
