"""
Linear transforms used by the color space conversions.

Forward matrices take linear-light RGB (or LMS) to XYZ; the inverses are
derived with numpy so each pair stays consistent. Values follow the sample
code of CSS Color 4.
"""
import numpy as np

# Reference whites, as XYZ with Y = 1
D50 = np.array([0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585])
D65 = np.array([0.3127 / 0.3290, 1.0, (1.0 - 0.3127 - 0.3290) / 0.3290])

# Bradford chromatic adaptation
D65_TO_D50 = np.array([
    [1.0479297925449969, 0.022946870601609652, -0.05019226628920524],
    [0.02962780877005599, 0.9904344267538799, -0.017073799063418826],
    [-0.009243040646204504, 0.015055191490298152, 0.7518742814281371],
])
D50_TO_D65 = np.linalg.inv(D65_TO_D50)

LIN_SRGB_TO_XYZ = np.array([
    [506752 / 1228815, 87881 / 245763, 12673 / 70218],
    [87098 / 409605, 175762 / 245763, 12673 / 175545],
    [7918 / 409605, 87881 / 737289, 1001167 / 1053270],
])
XYZ_TO_LIN_SRGB = np.linalg.inv(LIN_SRGB_TO_XYZ)

LIN_P3_TO_XYZ = np.array([
    [608311 / 1250200, 189793 / 714400, 198249 / 1000160],
    [35783 / 156275, 247089 / 357200, 198249 / 2500400],
    [0.0, 32229 / 714400, 5220557 / 5000800],
])
XYZ_TO_LIN_P3 = np.linalg.inv(LIN_P3_TO_XYZ)

LIN_A98_TO_XYZ = np.array([
    [573536 / 994567, 263643 / 1420810, 187206 / 994567],
    [591459 / 1989134, 6239551 / 9945670, 374412 / 4972835],
    [53769 / 1989134, 351524 / 4972835, 4929758 / 4972835],
])
XYZ_TO_LIN_A98 = np.linalg.inv(LIN_A98_TO_XYZ)

# ProPhoto is defined against D50
LIN_PROPHOTO_TO_XYZ_D50 = np.array([
    [0.7977666449006423, 0.1351812974005331, 0.0313477341283922],
    [0.2880748288194013, 0.7118352342418731, 0.0000899369387256],
    [0.0, 0.0, 0.8251046025104602],
])
XYZ_D50_TO_LIN_PROPHOTO = np.linalg.inv(LIN_PROPHOTO_TO_XYZ_D50)

LIN_REC2020_TO_XYZ = np.array([
    [63426534 / 99577255, 20160776 / 139408157, 47086771 / 278816314],
    [26158966 / 99577255, 472592308 / 697040785, 8267143 / 139408157],
    [0.0, 19567812 / 697040785, 295819943 / 278816314],
])
XYZ_TO_LIN_REC2020 = np.linalg.inv(LIN_REC2020_TO_XYZ)

# OKLab, from XYZ D65
XYZ_TO_LMS = np.array([
    [0.8190224379967030, 0.3619062600528904, -0.1288737815209879],
    [0.0329836539323885, 0.9292868615863434, 0.0361446663506424],
    [0.0481771893596242, 0.2642395317527308, 0.6335478284694309],
])
LMS_TO_XYZ = np.linalg.inv(XYZ_TO_LMS)

LMS_TO_OKLAB = np.array([
    [0.2104542683093140, 0.7936177747023054, -0.0040720430116193],
    [1.9779985324311684, -2.4285922420485799, 0.4505937096174110],
    [0.0259040424655478, 0.7827717124575296, -0.8086757549230774],
])
OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)


def apply(matrix: np.ndarray, values) -> tuple[float, float, float]:
    """Multiply a 3x3 matrix with a 3-vector and return plain floats."""
    result = matrix @ np.asarray(values, dtype=float)
    return float(result[0]), float(result[1]), float(result[2])
