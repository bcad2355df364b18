"""Isohedral tiling type table, IH1-IH93.

Entries are keyed by IH number; twelve numbers have no isohedral type and are
absent.  Arrays are shared between entries that have identical data.

Coefficient arrays are flat.  Each coordinate occupies ``num_params + 1``
consecutive values ``(c0, ..., cn-1, k)`` and evaluates to
``c0 * p[0] + ... + cn-1 * p[n-1] + k``.

* ``vertex_coeffs`` holds x then y for every tiling vertex, counter-clockwise.
* ``translation_coeffs`` holds T1.x, T1.y, T2.x, T2.y.
* ``aspect_coeffs`` holds the row-major affine entries ``a, b, c, d, e, f``
  of each aspect; aspect 0 is the identity.
* ``edge_orientations`` holds a ``flip, rotate`` flag pair per polygon edge.
* ``coloring`` holds twelve initial colours (one per aspect, unused slots
  zero), the permutation applied per step along T1 in slots 12-14, the one
  applied per step along T2 in slots 15-17, and the number of colours used in
  slot 18.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

TILING_TYPE_IDS: Tuple[int, ...] = (
    1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 20, 21, 22,
    23, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, 36, 37, 38, 39, 40, 41, 42,
    43, 44, 45, 46, 47, 49, 50, 51, 52, 53, 54, 55, 56, 57, 58, 59, 61, 62, 64,
    66, 67, 68, 69, 71, 72, 73, 74, 76, 77, 78, 79, 81, 82, 83, 84, 85, 86, 88,
    90, 91, 93,
)

_ES_00 = ("J", "J", "J")
_ES_01 = ("S", "J", "S", "S", "S")
_ES_02 = ("S", "J", "J", "S")
_ES_03 = ("S", "J", "S", "J")
_ES_04 = ("S", "S", "S")
_ES_05 = ("S", "J")
_ES_06 = ("J",)
_ES_07 = ("S",)
_ES_08 = ("U", "J")
_ES_09 = ("U", "S", "S")
_ES_10 = ("J", "I")
_ES_11 = ("S", "I", "S")
_ES_12 = ("I", "J")
_ES_13 = ("I", "S")
_ES_14 = ("U",)
_ES_15 = ("I",)
_ES_16 = ("S", "J", "J")
_ES_17 = ("J", "J", "I")
_ES_18 = ("S", "S", "J", "S")
_ES_19 = ("S", "S", "J", "I")
_ES_20 = ("J", "J", "S")
_ES_21 = ("S", "I", "I")
_ES_22 = ("J", "I", "I")
_ES_23 = ("J", "J")
_ES_24 = ("I", "I")
_ES_25 = ("J", "S")
_ES_26 = ("S", "S", "S", "S")
_ES_27 = ("J", "S", "S")
_ES_28 = ("I", "S", "I", "S")
_ES_29 = ("J", "I", "S")
_ES_30 = ("I", "I", "I", "S")
_ES_31 = ("S", "S")
_ES_32 = ("S", "I")
_ES_33 = ("U", "I")
_ES_34 = ("U", "S")
_ES_35 = ("I", "I", "I")
_ES_36 = ("I", "S", "I")
_ES_37 = ("I", "S", "S")

_ESI_00 = (0, 1, 2, 0, 1, 2)
_ESI_01 = (0, 0, 1, 2, 2, 1)
_ESI_02 = (0, 1, 0, 2, 1, 2)
_ESI_03 = (0, 1, 2, 3, 1, 4)
_ESI_04 = (0, 1, 2, 2, 1, 3)
_ESI_05 = (0, 1, 2, 3, 1, 3)
_ESI_06 = (0, 0, 1, 1, 2, 2)
_ESI_07 = (0, 1, 1, 0, 1, 1)
_ESI_08 = (0, 0, 0, 0, 0, 0)
_ESI_09 = (0, 1, 2, 0, 2, 1)
_ESI_10 = (0, 1, 0, 0, 1, 0)
_ESI_11 = (0, 1, 2, 2, 1, 0)
_ESI_12 = (0, 1, 1, 1, 1, 0)
_ESI_13 = (0, 1, 1, 2, 2)
_ESI_14 = (0, 0, 1, 2, 1)
_ESI_15 = (0, 1, 2, 3, 2)
_ESI_16 = (0, 1, 2, 1, 2)
_ESI_17 = (0, 1, 1, 1, 1)
_ESI_18 = (0, 1, 2, 0)
_ESI_19 = (0, 1, 1, 0)
_ESI_20 = (0, 0, 0, 0)
_ESI_21 = (0, 1, 0)
_ESI_22 = (0, 1, 0, 1)
_ESI_23 = (0, 1, 0, 2)
_ESI_24 = (0, 0, 1, 1)
_ESI_25 = (0, 1, 2, 3)
_ESI_26 = (0, 0, 1, 2)
_ESI_27 = (0, 1, 2)
_ESI_28 = (0, 0, 1)
_ESI_29 = (0, 0, 0)

_EO_00 = (
    False, False, False, False, False, False, False, True, False, True, False,
    True,
)
_EO_01 = (
    False, False, True, True, False, False, False, False, True, True, False,
    True,
)
_EO_02 = (
    False, False, False, False, True, True, False, False, False, True, True,
    True,
)
_EO_03 = (
    False, False, False, False, False, False, False, False, False, True, False,
    False,
)
_EO_04 = (
    False, False, False, False, False, False, True, True, False, True, False,
    False,
)
_EO_05 = (
    False, False, False, False, False, False, False, False, True, True, True,
    True,
)
_EO_06 = (
    False, False, False, True, False, False, False, True, False, False, False,
    True,
)
_EO_07 = (
    False, False, False, False, False, False, False, False, False, False,
    False, False,
)
_EO_08 = (
    False, False, False, False, True, True, False, False, False, False, True,
    True,
)
_EO_09 = (
    False, False, False, False, True, True, False, True, False, True, True,
    False,
)
_EO_10 = (
    False, False, False, False, False, False, False, True, True, False, True,
    False,
)
_EO_11 = (
    False, False, False, False, True, True, False, True, True, False, True,
    False,
)
_EO_12 = (
    False, False, False, False, False, False, True, False, True, False, True,
    False,
)
_EO_13 = (
    False, False, False, False, False, True, True, True, True, False, True,
    False,
)
_EO_14 = (
    False, False, False, False, True, False, False, False, False, False, True,
    False,
)
_EO_15 = (False, False, False, False, False, True, False, False, False, True)
_EO_16 = (False, False, True, True, False, False, False, False, False, True)
_EO_17 = (False, False, False, False, False, False, False, False, False, True)
_EO_18 = (False, False, True, False, False, False, False, False, True, False)
_EO_19 = (False, False, False, False, False, False, True, True, True, True)
_EO_20 = (False, False, False, False, False, True, True, True, True, False)
_EO_21 = (False, False, False, False, False, False, False, True)
_EO_22 = (False, False, False, False, False, True, False, True)
_EO_23 = (False, False, False, False, True, False, True, False)
_EO_24 = (False, False, False, True, False, False, False, True)
_EO_25 = (False, False, True, False, True, True, False, True)
_EO_26 = (False, False, True, False, False, False, True, False)
_EO_27 = (False, False, False, False, False, True)
_EO_28 = (False, False, False, False, True, False)
_EO_29 = (False, False, False, False, False, True, False, False)
_EO_30 = (False, False, False, False, False, True, True, True)
_EO_31 = (False, False, True, True, False, False, True, True)
_EO_32 = (False, False, False, False, True, True, False, False)
_EO_33 = (False, False, False, False, False, False, False, False)
_EO_34 = (False, False, False, False, True, True, True, True)
_EO_35 = (False, False, True, True, False, False, False, False)
_EO_36 = (False, False, False, True, False, False, False, False)
_EO_37 = (False, False, False, False, False, True, True, False)
_EO_38 = (False, False, False, False, True, False, False, False)
_EO_39 = (False, False, True, True, False, True, True, False)
_EO_40 = (False, False, False, True, True, True, True, False)
_EO_41 = (False, False, False, False, False, False)
_EO_42 = (False, False, True, True, False, False)
_EO_43 = (False, False, False, True, False, False)
_EO_44 = (False, False, True, False, False, False)

_DP_00 = (0.12239750492, 0.5, 0.143395479017, 0.625)
_DP_01 = (0.12239750492, 0.5, 0.225335752741, 0.225335752741)
_DP_02 = (0.12239750492, 0.5, 0.225335752741, 0.625)
_DP_03 = (0.12239750492, 0.5, 0.315470053838, 0.5, 0.315470053838, 0.5)
_DP_04 = (0.12239750492, 0.5, 0.225335752741, 0.225335752741, 0.5)
_DP_05 = (0.12239750492, 0.5, 0.225335752741, 0.625, 0.5)
_DP_06 = (0.6, 0.196416770201)
_DP_07 = (0.12239750492, 0.5, 0.225335752741)
_DP_08 = ()
_DP_09 = (0.12239750492, 0.225335752741)
_DP_10 = (0.12239750492, 0.225335752741, 0.5)
_DP_11 = (0.12239750492, 0.225335752741, 0.225335752741)
_DP_12 = (0.216506350946,)
_DP_13 = (0.104512294489, 0.65)
_DP_14 = (0.230769230769, 0.5, 0.225335752741)
_DP_15 = (0.230769230769, 0.5, 0.225335752741, 0.5)
_DP_16 = (0.230769230769, 0.225335752741)
_DP_17 = (0.141304, 0.465108, 0.534891)
_DP_18 = (0.452827026611, 0.5)
_DP_19 = (0.366873818946,)
_DP_20 = (0.230769230769,)
_DP_21 = (0.230769230769, 0.5)
_DP_22 = (0.5, 0.102564102564)
_DP_23 = (0.230769230769, 0.869565217391)
_DP_24 = (0.5, 0.230769230769, 0.5, 0.5)
_DP_25 = (0.230769230769, 0.5, 0.230769230769)
_DP_26 = (0.5, 0.5, 0.6)
_DP_27 = (0.5, 0.102564102564, 0.102564102564)
_DP_28 = (0.230769230769, 0.230769230769)
_DP_29 = (0.5,)
_DP_30 = (0.105263157895,)
_DP_31 = (0.196416770201,)
_DP_32 = (0.5, 0.196416770201)

_TVC_00 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3.9, 0, 0, 0, 0.1, 0, 5, 0, 0, -2.5, 3.9, 0,
    5.5, 0, -0.4, 0, 5, 0, -4, 0.5, 3.9, 0, 0, 0, 0.1, 0, 5, 0, 0, -1.5, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -5.5, 0, 0.5, 0, 0, 0, 4, -2,
)
_TVC_01 = (
    3.9, 0, 0, 0, 0.1, 0, 5, 0, 0, -2.5, 3.9, 0, 0, 3.5, -0.4, 0, 5, 0, 0, -2,
    3.9, 0, 0, 0, 0.1, 0, 5, 0, 0, -1.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0,
    -3.5, 0, 0.5, 0, 0, 0, 0, 0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
)
_TVC_02 = (
    0, 0, -3.5, 0, 0.5, 0, 0, 0, 4, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3.9, 0,
    0, 0, 0.1, 0, 5, 0, 0, -2.5, 3.9, 0, 3.5, 0, -0.4, 0, 5, 0, 4, -4.5, 3.9,
    0, 0, 0, 0.1, 0, 5, 0, 0, -1.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
)
_TVC_03 = (
    0, 0, -2.5, 0, 0, 0, 0.5, 0, 0, 0, 3, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 3.9, 0, 0, 0, 0, 0, 0.1, 0, 5, 0, 0, 0, 0, -2.5, 3.9, 0, 0,
    0, 2.5, 0, -0.4, 0, 5, 0, 0, 0, 3, -3.5, 3.9, 0, 0, 0, 0, 0, 0.1, 0, 5, 0,
    0, 0, 0, -1.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
)
_TVC_04 = (
    3.9, 0, 0, 3.5, 0, -0.4, 0, 5, 0, 0, 5, -4.5, 3.9, 0, 0, 0, 0, 0.1, 0, 5,
    0, 0, 0, -1.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, -3.5, 0, 0, 0.5,
    0, 0, 0, 0, 0, 0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3.9, 0, 0, 0, 0,
    0.1, 0, 5, 0, 0, 0, -2.5,
)
_TVC_05 = (
    3.9, 0, 3.5, 0, 0, -0.4, 0, -5, 0, 4, 0, 0.5, 3.9, 0, 0, 0, 5, -2.4, 0, 5,
    0, 0, 0, -1.5, 0, 0, 0, 0, 5, -2.5, 0, 0, 0, 0, 0, 1, 0, 0, -3.5, 0, 0,
    0.5, 0, 0, 0, 4, 0, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3.9, 0, 0, 0,
    0, 0.1, 0, -5, 0, 0, 0, 2.5,
)
_TVC_06 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0.5, 0, 0, -0.288675134595, 0, 0, 1, 0, 0, 0, 2.5,
    1.12583302492, -0.721132486541, -1.44337567297, 1.95, 1.06036297108, 5, 0,
    -2.5, 0, 3.9, 0.1, 2.5, -1.12583302492, -1.27886751346, 1.44337567297,
    1.95, -0.671687836487,
)
_TVC_07 = (
    0, 0, 0, 0, 0, 0, 0, 0, 3.9, 0, 0, 0.1, 0, 5, 0, -2.5, 3.9, 0, 3.5, -0.4,
    0, 5, 0, -2, 3.9, 0, 0, 0.1, 0, 5, 0, -1.5, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0,
    -3.5, 0.5, 0, 0, 0, 0.5,
)
_TVC_08 = (
    1, 0, 0.5, 0.866025403784, -0.5, 0.866025403784, -1, 0, -0.5,
    -0.866025403784, 0.5, -0.866025403784,
)
_TVC_09 = (
    0, 0, 0, 0, 0, 0, 3.9, 0, 0.1, 0, 0, 0, 3.9, 3.5, -0.4, 0, 0, 0.5, 3.9, 0,
    0.1, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, -3.5, 0.5, 0, 0, 0.5,
)
_TVC_10 = (
    0, 0, 0, 0, 0, 0, 0, 0, 3.9, 0, 0, 0.1, 0, 0, 0, 0, 3.9, 3.5, 0, -0.4, 0,
    0, 5, -2, 3.9, 0, 0, 0.1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, -3.5, 0,
    0.5, 0, 0, 5, -2,
)
_TVC_11 = (
    3.9, 3.5, -0.4, 0, 0, 0.5, 3.9, 0, 0.1, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, -3.5,
    0.5, 0, 0, 0.5, 0, 0, 0, 0, 0, 0, 3.9, 0, 0.1, 0, 0, 0,
)
_TVC_12 = (
    0, -3.5, 0, 0.5, 0, 0, 0, 0.5, 0, 0, 0, 0, 0, 0, 0, 0, 3.9, 0, 0, 0.1, 0,
    0, 0, 0, 3.9, 0, 3.5, -0.4, 0, 0, 0, 0.5, 3.9, 0, 0, 0.1, 0, 0, 0, 1, 0, 0,
    0, 0, 0, 0, 0, 1,
)
_TVC_13 = (
    0, 0.5, 0, -0.288675134595, 0, 1, 0, 0, 1.15470053838, 0.75, 2,
    0.144337567297, 0, 0.5, 4, 0, -1.15470053838, 0.25, 2, 0.144337567297, 0,
    0, 0, 0,
)
_TVC_14 = (
    0, 0, 1, 0, 0, 0, 0, 5, -2.5, 5.1, 0, -0.1, -1.47224318643, 2.5,
    -1.22113248654, 2.55, 1.44337567297, -0.771687836487, 0, 0, 0, 0, 0, 0, 0,
    0, 0.5, 0, 0, -0.866025403784,
)
_TVC_15 = (
    3.9, 0, 0, 0.1, 0, 5, 0, -2.5, 3.9, 0, 3.5, -0.4, 0, 5, 0, -2, 3.9, 0, 0,
    0.1, 0, 5, 0, -1.5, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0,
)
_TVC_16 = (
    3.9, 0, 0, 0, 0.1, 0, 5, 0, 0, -2.5, 3.9, 0, 3.5, 0, -0.4, 0, 5, 0, 4, -4,
    3.9, 0, 0, 0, 0.1, 0, 5, 0, 0, -1.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0,
)
_TVC_17 = (
    3.9, 0, 0.1, 0, 0, 0, 3.9, 3.5, -0.4, 0, 0, 0.5, 3.9, 0, 0.1, 0, 0, 1, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0,
)
_TVC_18 = (
    0, 0, 5, -2.5, 0, 0, 0, 1, 0, 0, -5, 2.5, 0, 10, 0, -4, 0, 0, 0, 0, 0, 0,
    0, 0, 3.9, 0, 0, 0.1, 0, -5, 0, 2.5, 3.9, 0, 5, -2.4, 0, 5, 0, -1.5,
)
_TVC_19 = (
    0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1.95, 2.5, -0.95, -1.95, 2.5, -1.05,
    3.9, 0, 0.1, 0, 5, -2, 1.95, -2.5, 1.55, 1.95, 2.5, -0.45,
)
_TVC_20 = (
    0, -1, 0, 0, 0, 1, 0, 0, 4.95, 0.55, 4.95, 0.55, 0, 0, 9.9, 0.1, -4.95,
    -0.55, 4.95, 0.55,
)
_TVC_21 = (
    0, 1, 0, 0, 2.925, 0.075, 1.68874953738, 0.0433012701892, 0, 0, 0, 0,
    -2.925, 1.425, 1.68874953738, -0.822724133595,
)
_TVC_22 = (1, 0, 0.75, 0.433012701892, 0, 0, 0.75, -0.433012701892)
_TVC_23 = (0.5, 0, 0, 0.866025403784, -0.5, 0, 0, -0.866025403784)
_TVC_24 = (0, 0.57735026919, -1, 0, 1, 0)
_TVC_25 = (
    0, 0, 0, 0, 0, 0, 3.9, 0, 0.1, 0, 5, -2.5, 3.9, 0, 0.1, 0, 5, -1.5, 0, 0,
    0, 0, 0, 1,
)
_TVC_26 = (
    5, 0, -2, 0, -3.9, -0.1, 0, 0, 1, 0, 0, 0, 5, 0, -2, 0, 3.9, 0.1, 0, 0, 0,
    0, 0, 0,
)
_TVC_27 = (
    0, 0, 1, 0, 0, 0, 0, -3.45, 4, 3.9, 0, 0.1, 0, 3.45, -3, 3.9, 0, 0.1, 0, 0,
    0, 0, 0, 0,
)
_TVC_28 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 5, 0, 0, 0,
    -1.5, 0, 3.9, 0, 0, 0.1, 0, 0, 5, 0, -2.5, 0, 0, 0, 5, -1.5,
)
_TVC_29 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -5, 3.9, 2.6, 3.9, 0, 0,
    0.1, 0, -5, 0, 2.5, 3.9, 0, 0, 0.1,
)
_TVC_30 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, -10, 0, 0, 5, 0, 10, 0, -4, 10, 0, 10,
    -10, 0, 10, 0, -5, 0, 0, 10, -5,
)
_TVC_31 = (0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 3.9, 0.1, 0, 0, 3.9, 0.1)
_TVC_32 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0.5, 0, 0, 3.9, 0.1, 0, 0, 0, 0, 0, 0, 0,
    0, 5, 0, 0, -2, 0, -3.9, 0, -0.1,
)
_TVC_33 = (
    0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 3.9, 0, 0.1, 0, 0, 0, 3.9, 0, 0.1, 0,
    3.9, 0.1,
)
_TVC_34 = (1, 0, 1, 1, 0, 1, 0, 0)
_TVC_35 = (1.8, 0.1, 0, 0, 0, 1, 0, 1, 0, 0, -1.8, 1.9, 0, 0, 0, 0)
_TVC_36 = (3.8, 0.1, 0, 0, 0, 0, -3.8, 0.9, -3.8, -0.1, 0, 0, 0, 0, 3.8, -0.9)
_TVC_37 = (0, 0, 0.57735026919, 0, 0, 1)
_TVC_38 = (0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 3.9, 0.1)
_TVC_39 = (0.5, 0.5, 0, 0, 1, 0)
_TVC_40 = (0, 1, 0, 0, 0, 0.5, 3.9, 0.1, 0, 0, 0, 0)
_TVC_41 = (0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 5, 0, -2, 0, 3.9, 0.1)
_TVC_42 = (1, 0, -0.5, 0.866025403784, -0.5, -0.866025403784)

_TC_00 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 3.9, 0, 5.5, 0, -0.4, 0, 5, 0, -4, -0.5,
)
_TC_01 = (0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 7.8, 0, 3.5, 3.5, -0.8, 0, 0, 0, 0, 0)
_TC_02 = (0, 0, 0, 0, 0, 0, 0, 0, 0, -1, -7.8, 0, -7, 0, 0.8, 0, 0, 0, 0, -1)
_TC_03 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, -7.8, 0, -2.5, 0, -2.5, 0, 0.8,
    0, -10, 0, 3, 0, -3, 4,
)
_TC_04 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, -15.6, 0, -7, -7, 0, 1.6, 0, 0, 0, 0,
    0, -2,
)
_TC_05 = (
    0, 0, 0, 0, 0, 0, 0, 10, 0, 0, 0, -3, 7.8, 0, 7, 0, 0, -0.8, 0, 0, 0, 0, 0,
    0,
)
_TC_06 = (
    -2.5, -3.37749907476, 0.663397459622, 4.33012701892, -1.95, -3.08108891325,
    -2.5, 3.37749907476, 2.33660254038, -4.33012701892, -1.95, 2.11506350946,
)
_TC_07 = (0, 0, 0, 0, 0, 0, 0, -1, 7.8, 0, 7, -0.8, 0, 0, 0, 0)
_TC_08 = (1.5, 0.866025403784, 1.5, -0.866025403784)
_TC_09 = (1.5, 0.866025403784, 0, 1.73205080757)
_TC_10 = (0, 0, 0, 0, 0, -1, 3.9, 3.5, -0.4, 0, 0, -0.5)
_TC_11 = (0, 0, 0, 0, 0, 0, 0, -1, 7.8, 7, 0, -0.8, 0, 0, 0, 0)
_TC_12 = (3.9, 3.5, -0.4, 0, 0, 0.5, 3.9, 3.5, -0.4, 0, 0, -0.5)
_TC_13 = (0, 0, 0, 0, 0, 0, 0, -1, -7.8, -3.5, -3.5, 0.8, 0, 0, 0, 0)
_TC_14 = (0, 0, -4, -0.866025403784, 3.46410161514, 0.75, -2, -0.433012701892)
_TC_15 = (
    4.4167295593, -2.5, 2.66339745962, -2.55, -4.33012701892, 1.34903810568, 0,
    -5, 2.5, -5.1, 0, -1.63205080757,
)
_TC_16 = (-7.8, 0, -3.5, 0.3, 0, 0, 0, -0.5, -7.8, 0, -3.5, 0.3, 0, 0, 0, 0.5)
_TC_17 = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 7.8, 0, 3.5, 0, -0.3, 0, 10, 0, 4, -7.5,
)
_TC_18 = (0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 15.6, 0, 7, 0, -0.6, 0, 0, 0, 0, 0)
_TC_19 = (0, 0, 0, 0, 0, 0, 0, 1, -15.6, 0, -7, 0.6, 0, 0, 0, 0)
_TC_20 = (0, 0, 0, 0, 0, 1, -7.8, -3.5, 0.3, 0, 0, 0.5)
_TC_21 = (0, 0, 0, 0, 0, 10, 0, -3, -7.8, 0, -10, 4.8, 0, 0, 0, 0)
_TC_22 = (-3.9, 5, -3.1, -3.9, -5, 1.9, -3.9, -5, 1.9, 3.9, -5, 3.1)
_TC_23 = (9.9, 1.1, -9.9, -1.1, -9.9, -1.1, -9.9, -1.1)
_TC_24 = (0, 0, 0, 1.73205080757, 0, 1.5, 0, -0.866025403784)
_TC_25 = (-1.5, 0.866025403784, -1.5, -0.866025403784)
_TC_26 = (0, 1.73205080757, 1.5, -0.866025403784)
_TC_27 = (-1, 1.73205080757, 1, 1.73205080757)
_TC_28 = (1, 1.73205080757, -1, 1.73205080757)
_TC_29 = (1, 1.73205080757, 2, 0)
_TC_30 = (0, 0, 0, 0, 0, -1, 3.9, 0, 0.1, 0, 5, -2.5)
_TC_31 = (0, 0, 0, 0, 0, -1, 7.8, 0, 0.2, 0, 0, 0)
_TC_32 = (0, 0, 0, 0, -7.8, -0.2, 0, 0, 1, 0, 0, 0)
_TC_33 = (0, -6.9, 8, 0, 0, 0, 0, -3.45, 4, -3.9, 0, -0.1)
_TC_34 = (
    -5, 0, -5, 0, 5, 0, -3.9, 0, -5, 1.4, -5, 0, 0, 0, 1.5, 0, -3.9, 0, 0,
    -0.1,
)
_TC_35 = (0, 0, 0, 0, 0, -1, 7.8, 0, 0.2, 0, 10, -5)
_TC_36 = (0, 0, 0, 0, -7.8, 0, 0, -0.2, 0, 0, 3.9, 1.1, 0, 0, 0, 0)
_TC_37 = (-15.6, 0, -0.4, 0, 0, 0, 0, 0, 0, 0, 0, -1)
_TC_38 = (0, 0, 0, 0, -20, 0, -20, 20, 0, 0, 0, -2, 0, 0, 0, 0)
_TC_39 = (0, 2, 0, 0, 0, 0, -7.8, -0.2)
_TC_40 = (0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, -7.8, -7.8, -0.4)
_TC_41 = (-7.8, 0, -0.2, 0, 0, 0, -3.9, 0, -0.1, 0, 3.9, 1.1)
_TC_42 = (0, 2, 2, 0)
_TC_43 = (0, 0, 0, 4, 0, -2, 0, 2)
_TC_44 = (0, 0, -7.6, 1.8, 7.6, 0.2, -7.6, 1.8)
_TC_45 = (1, 1, 1, -1)
_TC_46 = (1, 0, 0, 1)
_TC_47 = (0, 0, -3.9, -0.1, 0, 1, 0, 0)
_TC_48 = (0, 0, -3.9, -0.1, 0, 2, 0, 0)
_TC_49 = (0, -3.45, 4, -3.9, 0, -0.1, 0, -3.45, 4, 3.9, 0, 0.1)
_TC_50 = (3.8, 0.1, -3.8, 0.9, -3.8, -0.1, -3.8, 0.9)
_TC_51 = (0, 2, -1.73205080757, 1)
_TC_52 = (0, 2, 0, 0, 0, 1, 3.9, 0.1)
_TC_53 = (0, 1, -1, 0)
_TC_54 = (-1, 1, -2, 0)
_TC_55 = (0, 1, 1, 0)
_TC_56 = (0, 0.5, -3.9, -0.1, 0, -0.5, -3.9, -0.1)
_TC_57 = (-5, 0, 2, 0, -3.9, -0.1, -5, 0, 3, 0, -3.9, -0.1)
_TC_58 = (0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 7.8, 0.2)
_TC_59 = (0, 1, 0, 0, 0, 0, 7.8, 0.2)
_TC_60 = (-1.5, 2.59807621135, -3, 0)
_TC_61 = (0, -0.5, -3.9, -0.1, 0, 0.5, -3.9, -0.1)

_AC_00 = (
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    0, 0, 0, 0, 0,
)
_AC_01 = (
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 7.8, 0, 0, 3.5, -0.3, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, -0.5,
)
_AC_02 = (
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -3.9, 0, -3.5, 0, 0.4, 0, 0,
    0, 0, 0, 0, 0, 0, 0, -1, 0, 5, 0, 4, -4.5,
)
_AC_03 = (
    0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0,
    0, 0, 0, 0, 0, 0, 0, 0, -2.5, 0, 0, 0, 0.5, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, -1, 0, 0, 0, 3, 0, 0, -1,
)
_AC_04 = (
    0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 7.8,
    0, 0, 3.5, 0, -0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 10, 0, 0, 5,
    -6, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, -3.5, 0, 0, 0.5, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -0.5, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0,
    0, 0, -7.8, 0, -3.5, -3.5, 0, 0.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0,
    10, 0, 0, 5, -7.5,
)
_AC_05 = (
    0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 7.8,
    0, 3.5, 0, 5, -2.8, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 4, 0, -1,
    0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 3.9, 0, 0, 0, 5, -2.4, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 1, 0, 5, 0, 0, 0, -1.5, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 3.9, 0, 3.5, 0, 0, -0.4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, -5, 0,
    4, 0, 0.5,
)
_AC_06 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -0.5, 0, 0,
    -0.866025403784, 0, 0, 0.5, 0, 0, 0.866025403784, 0, 0, -0.5, 0, 0,
    -0.866025403784, 0, 0, -0.5, 0, 0, 0.866025403784, 0, 0, 1, 0, 0,
    -0.866025403784, 0, 0, -0.5, 0, 0, 0,
)
_AC_07 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 7.8, 0, 3.5, -0.3, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0,
    -0.5,
)
_AC_08 = (1, 0, 0, 0, 1, 0)
_AC_09 = (0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0)
_AC_10 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 7.8, 3.5, 0, -0.3, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 5,
    -2,
)
_AC_11 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 0, -3.5, 0, 0.5, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0,
    0.5,
)
_AC_12 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0.5, 0, 0.866025403784, 0, 0.5, 0,
    0.866025403784, 0, -0.5, 0, -0.866025403784, 0, -0.5, 0, -0.866025403784,
    0, 0.5, 0, 0.866025403784, 0, -0.5, 0, -0.866025403784,
)
_AC_13 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0.5, 0, 0,
    0.866025403784, 0, 0, 1, 0, 0, -0.866025403784, 0, 0, 0.5, 0, 0, 0, 0, 0,
    -0.5, 0, 0, 0.866025403784, 0, 0, 1.5, 0, 0, -0.866025403784, 0, 0, -0.5,
    0, 0, -0.866025403784, 0, 0, -1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0,
    -1.73205080757, 0, 0, -0.5, 0, 0, -0.866025403784, 0, 0, 0, 0, 0,
    0.866025403784, 0, 0, -0.5, 0, 0, -1.73205080757, 0, 0, 0.5, 0, 0,
    -0.866025403784, 0, 0, -0.5, 0, 0, 0.866025403784, 0, 0, 0.5, 0, 0,
    -0.866025403784,
)
_AC_14 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0,
)
_AC_15 = (
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 7.8, 0, 3.5, 0, -0.3, 0, 0,
    0, 0, 0, 0, 0, 0, 0, -1, 0, 10, 0, 4, -6.5,
)
_AC_16 = (
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 7.8, 0, 3.5, 0, -0.3, 0, 0,
    0, 0, 0, 0, 0, 0, 0, -1, 0, 10, 0, 4, -6.5, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0,
    15.6, 0, 7, 0, -0.6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 1, 0, 0, 0, 0, 0, 7.8, 0, 3.5, 0, -0.3, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1,
    0, 10, 0, 4, -6.5,
)
_AC_17 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 1, 0,
    0, 0, -1, 0, 0, 0, 0, -7.8, 0, -3.5, 0.3, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0,
    -0.5, 0, 0, 0, 1, 0, 0, 0, 0, -7.8, 0, -3.5, 0.3, 0, 0, 0, 0, 0, 0, 0, -1,
    0, 0, 0, 0.5,
)
_AC_18 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 1,
)
_AC_19 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 10, 0, -3, 0,
    0, 0, 1, 0, 0, 0, 0, -3.9, 0, -5, 2.4, 0, 0, 0, 0, 0, 0, 0, -1, 0, 5, 0,
    -1.5, 0, 0, 0, -1, 0, 0, 0, 0, 3.9, 0, 5, -2.4, 0, 0, 0, 0, 0, 0, 0, 1, 0,
    5, 0, -1.5,
)
_AC_20 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 1, 0, 0, 0, 0, 0, -1, -3.9, 0, -0.1, 0, 0,
    1, 0, 0, 0, 0, -5, 3, 0, 0, 0, 0, 0, 1, -3.9, 0, -1.1, 0, 0, -1, 0, 0, 0,
    0, -5, 3,
)
_AC_21 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0,
    0, 0, 0, -1, 9.9, 1.1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, -9.9, -1.1, 0, 1, 0,
    0, 0, 0,
)
_AC_22 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -0.5, 0, 0.866025403784, 0, 1.5, 0,
    -0.866025403784, 0, -0.5, 0, 0.866025403784, 0, -0.5, 0, -0.866025403784,
    0, 1.5, 0, 0.866025403784, 0, -0.5, 0, -0.866025403784, 0, 0.5, 0,
    0.866025403784, 0, 0, 0, 0.866025403784, 0, -0.5, 0, 0, 0, -1, 0, 0, 0,
    1.5, 0, 0, 0, 1, 0, 0.866025403784, 0, 0.5, 0, -0.866025403784, 0, 0, 0,
    -0.866025403784, 0, -0.5, 0, 1.73205080757,
)
_AC_23 = (
    1, 0, 0, 0, 1, 0, 0.5, -0.866025403784, 0, 0.866025403784, 0.5, 0, -0.5,
    -0.866025403784, 0, 0.866025403784, -0.5, 0, -1, 0, 0, 0, -1, 0, -0.5,
    0.866025403784, 0, -0.866025403784, -0.5, 0, 0.5, 0.866025403784, 0,
    -0.866025403784, 0.5, 0,
)
_AC_24 = (
    1, 0, 0, 0, 1, 0, -0.5, -0.866025403784, 1.5, 0.866025403784, -0.5,
    -0.866025403784, -0.5, 0.866025403784, 1.5, -0.866025403784, -0.5,
    0.866025403784, 0.5, 0.866025403784, 0, 0.866025403784, -0.5, 0, 0.5,
    -0.866025403784, 0, -0.866025403784, -0.5, 1.73205080757, -1, 0, 1.5, 0, 1,
    0.866025403784,
)
_AC_25 = (
    1, 0, 0, 0, 1, 0, -0.5, 0.866025403784, 0.75, -0.866025403784, -0.5,
    0.433012701892, -0.5, -0.866025403784, 0.75, 0.866025403784, -0.5,
    -0.433012701892,
)
_AC_26 = (
    1, 0, 0, 0, 1, 0, 0.5, -0.866025403784, 0.75, 0.866025403784, 0.5,
    0.433012701892, -0.5, -0.866025403784, 0.75, 0.866025403784, -0.5,
    1.29903810568,
)
_AC_27 = (
    1, 0, 0, 0, 1, 0, 0.5, 0.866025403784, 0.75, 0.866025403784, -0.5,
    0.433012701892, -0.5, -0.866025403784, 0.75, 0.866025403784, -0.5,
    -0.433012701892,
)
_AC_28 = (
    1, 0, 0, 0, 1, 0, -0.5, -0.866025403784, 0.75, -0.866025403784, 0.5,
    0.433012701892, -0.5, 0.866025403784, 0.75, 0.866025403784, 0.5,
    -0.433012701892,
)
_AC_29 = (
    1, 0, 0, 0, 1, 0, -0.5, 0.866025403784, -0.5, -0.866025403784, -0.5,
    0.866025403784, -0.5, -0.866025403784, 0.5, 0.866025403784, -0.5,
    0.866025403784, -0.5, 0.866025403784, -1.5, 0.866025403784, 0.5,
    0.866025403784, -0.5, -0.866025403784, -0.5, -0.866025403784, 0.5,
    0.866025403784, 1, 0, -1, 0, -1, 1.73205080757,
)
_AC_30 = (
    1, 0, 0, 0, 1, 0, -0.5, 0.866025403784, -0.5, -0.866025403784, -0.5,
    0.866025403784, -0.5, -0.866025403784, 0.5, 0.866025403784, -0.5,
    0.866025403784, 0.5, -0.866025403784, -0.5, 0.866025403784, 0.5,
    0.866025403784, 0.5, 0.866025403784, -1.5, -0.866025403784, 0.5,
    0.866025403784, -1, 0, -1, 0, -1, 1.73205080757,
)
_AC_31 = (
    1, 0, 0, 0, 1, 0, -0.5, -0.866025403784, 0.5, 0.866025403784, -0.5,
    0.866025403784, -0.5, 0.866025403784, -0.5, -0.866025403784, -0.5,
    0.866025403784, 0.5, 0.866025403784, 0.5, -0.866025403784, 0.5,
    0.866025403784, 0.5, -0.866025403784, 1.5, 0.866025403784, 0.5,
    0.866025403784, -1, 0, 1, 0, -1, 1.73205080757,
)
_AC_32 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0,
    7.8, 0, 0.2, 0, 0, 0, 0, 0, 1, 0, 0, 0,
)
_AC_33 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0,
    3.9, 0, 0.1, 0, 0, 0, 0, 0, -1, 0, 5, -1.5,
)
_AC_34 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 5,
    0, -1, 0, 0, 0, 0, 0, 1, 0, -3.9, -0.1,
)
_AC_35 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0,
    -3.45, 4, 0, 0, 0, 0, 0, -1, 3.9, 0, 0.1,
)
_AC_36 = (
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1,
    0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, 0, 0, -1, 0, 0, 0, 0, 0,
)
_AC_37 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0,
    7.8, 0, 0.2, 0, 0, 0, 0, 0, -1, 0, 10, -4,
)
_AC_38 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 0, -5, 3.9, 3.6, 0, 0, 0, 0, 0, 0, 0, -1, 3.9, 0, 0,
    0.1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0,
    0, 0, 0, 0, -1, 0, 0, 0, 0, 0, -5, 3.9, 3.6, 0, 0, 0, 0, 0, 0, 0, 1, 3.9,
    0, 0, 0.1,
)
_AC_39 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 1, 0, 0, -1, 0, 0, 0, 7.8, 0, 0.2, 0, 0, 0,
    0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, -7.8, 0, -0.2, 0, 0, 0, 0, 0, -1, 0, 0,
    1,
)
_AC_40 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 0, 10, 0, -5, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 10, -5,
    0, 0, 0, -1, 0, 0, 0, 0, 0, 10, 0, -4, 0, 0, 0, 0, 0, 0, 0, 1, -10, 0, -10,
    10, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0, -1, -10, 0,
    0, 5,
)
_AC_41 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0, 0, 2, 0, 0, 0, -1, 0, 0,
    0, -1, 0, 0, 0, 1, 0, 0, 0, 1, -3.9, -0.1, 0, 1, 0, 0, 0, 1, 0, 0, 0, -1,
    3.9, 0.1,
)
_AC_42 = (
    0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 0, 0, 0, 5, 0, 0, -2, 0, 0, 0, 0, 0, 0, 0, -1, 0, -3.9, 0,
    -0.1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0.5, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0,
    3.9, 0.1, 0, 0, 0, -1, 0, 0, 0, 0, 5, 0, 0, -2.5, 0, 0, 0, 0, 0, 0, 0, 1,
    0, -3.9, -3.9, -0.2,
)
_AC_43 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0,
    3.9, 0, 0.1, 0, 0, 0, 0, 0, -1, 0, 3.9, 1.1, 0, 0, -1, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, -3.9, 0, -0.1, 0, 0, 0, 0, 0, -1,
    0, 3.9, 1.1,
)
_AC_44 = (
    1, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 2, -1, 0, 2, 0, -1, 2, 0, -1, 2, 1, 0, 0,
)
_AC_45 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0, 0, 2, 0,
    -1, 0, 0, 0, 2, 0, 0, 0, -1, 0, 2, 0, 0, 0, -1, 0, 2, 0, 1, 0, 0, 0, 0, 0,
    1, 0, 0, 0, 0, 0, 0, 0, -1, 0, 4, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 2, 0,
    -1, 0, 0, 0, 2, 0, 0, 0, 1, 0, 2, 0, 0, 0, -1, 0, 2, 0, -1, 0, 0, 0, 4,
)
_AC_46 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 3.8, 0.1, 0, 0, 0, -1,
    -3.8, 0.9,
)
_AC_47 = (1, 0, 0, 0, 1, 0, 0, -1, 2, 1, 0, 0)
_AC_48 = (0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0)
_AC_49 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0, 0, 2, 0, 0, 0, -1, 3.9,
    0.1,
)
_AC_50 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0,
    -3.45, 5, 0, 0, 0, 0, 0, -1, 3.9, 0, 0.1,
)
_AC_51 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 5,
    0, -1, 0, 0, 0, 0, 0, -1, 0, -3.9, -0.1,
)
_AC_52 = (
    1, 0, 0, 0, 1, 0, 0, -1, 2, 1, 0, 0, -1, 0, 2, 0, -1, 2, 0, 1, 0, -1, 0, 2,
)
_AC_53 = (
    1, 0, 0, 0, 1, 0, 0.5, 0.866025403784, -0.866025403784, -0.866025403784,
    0.5, 0.5, -0.5, 0.866025403784, -0.866025403784, -0.866025403784, -0.5,
    1.5, -1, 0, 0, 0, -1, 2, -0.5, -0.866025403784, 0.866025403784,
    0.866025403784, -0.5, 1.5, 0.5, -0.866025403784, 0.866025403784,
    0.866025403784, 0.5, 0.5, -1, 0, 0, 0, 1, 0, -0.5, 0.866025403784,
    -0.866025403784, 0.866025403784, 0.5, 0.5, 0.5, 0.866025403784,
    -0.866025403784, 0.866025403784, -0.5, 1.5, 1, 0, 0, 0, -1, 2, 0.5,
    -0.866025403784, 0.866025403784, -0.866025403784, -0.5, 1.5, -0.5,
    -0.866025403784, 0.866025403784, -0.866025403784, 0.5, 0.5,
)
_AC_54 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0, 0, 1, 0, 0, 0, -1, 3.9,
    0.1, 0, -1, 0, 0, 0, 2, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, -1,
    3.9, 0.1,
)
_AC_55 = (
    1, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 1, -1, 0, 1, 0, -1, 1, 0, -1, 1, 1, 0, 0,
)
_AC_56 = (
    1, 0, 0, 0, 1, 0, 0, 1, 0, -1, 0, 1, -1, 0, 1, 0, -1, 1, 0, -1, 1, 1, 0, 0,
    -1, 0, 0, 0, 1, 0, 0, -1, 0, -1, 0, 1, 1, 0, -1, 0, -1, 1, 0, 1, -1, 1, 0,
    0,
)
_AC_57 = (
    1, 0, 0, 0, 1, 0, 0, -1, 1, 1, 0, 0, -1, 0, 1, 0, -1, 1, 0, 1, 0, -1, 0, 1,
)
_AC_58 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, -1, 0, 0,
)
_AC_59 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 0,
    0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0,
)
_AC_60 = (
    0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 0, 5,
    0, -1, 0, 0, 0, 0, 0, -1, 0, 3.9, 0.1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, -1, 0, 7.8, 0.2, 0, 0, -1, 0, 0, 0, 5, 0, -1, 0, 0, 0, 0, 0, 1, 0,
    3.9, 0.1,
)
_AC_61 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0, 0, 1, 0, 0, 0, -1, 7.8,
    0.2, 0, 1, 0, 0, 0, 0.5, 0, 0, 0, -1, 3.9, 0.1, 0, -1, 0, 0, 0, 1.5, 0, 0,
    0, 1, 3.9, 0.1,
)
_AC_62 = (
    1, 0, 0, 0, 1, 0, 0.5, -0.866025403784, 0.5, 0.866025403784, 0.5,
    0.866025403784, -0.5, -0.866025403784, 0, 0.866025403784, -0.5,
    1.73205080757, -1, 0, -1, 0, -1, 1.73205080757, -0.5, 0.866025403784, -1.5,
    -0.866025403784, -0.5, 0.866025403784, 0.5, 0.866025403784, -1,
    -0.866025403784, 0.5, 0,
)
_AC_63 = (1, 0, 0, 0, 1, 0, -1, 0, 0.5, 0, -1, 0.866025403784)
_AC_64 = (
    0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0, 0, 1, 0, 0, 0, -1, 0, 0,
)

_C_00 = (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 2, 0, 1, 3)
_C_01 = (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 1, 2, 3)
_C_02 = (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 2, 0, 1, 3)
_C_03 = (0, 1, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 2, 0, 1, 3)
_C_04 = (0, 1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 1, 2, 3)
_C_05 = (0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 3)
_C_06 = (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 0, 1, 2, 3)
_C_07 = (0, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 1, 2, 0, 2, 0, 1, 3)
_C_08 = (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 2, 0, 1, 3)
_C_09 = (0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 1, 2, 0, 3)
_C_10 = (0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 1, 0, 1, 2, 3)
_C_11 = (0, 1, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 1, 2, 0, 3)
_C_12 = (0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 0, 1, 2, 3)
_C_13 = (0, 1, 2, 1, 2, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 2, 0, 1, 3)
_C_14 = (0, 1, 2, 0, 1, 2, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 3)
_C_15 = (0, 2, 1, 1, 0, 2, 0, 0, 0, 0, 0, 0, 1, 2, 0, 2, 0, 1, 3)
_C_16 = (0, 2, 1, 0, 1, 2, 0, 0, 0, 0, 0, 0, 2, 0, 1, 1, 2, 0, 3)
_C_17 = (1, 0, 2, 2, 0, 1, 0, 0, 0, 0, 0, 0, 1, 2, 0, 2, 0, 1, 3)
_C_18 = (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, 1, 0, 2, 2)
_C_19 = (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, 0, 1, 2, 2)
_C_20 = (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 2)
_C_21 = (0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 2)
_C_22 = (0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 1, 0, 2, 2)
_C_23 = (0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 2)
_C_24 = (0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 2)
_C_25 = (0, 1, 0, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 2)
_C_26 = (0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 0, 1, 2, 0, 1, 2, 2)
_C_27 = (0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 2, 1, 0, 2, 2)
_C_28 = (0, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 2, 0, 1, 2, 2)

TILING_TYPE_DATA: Dict[int, Dict[str, Any]] = {
    1: {
        "num_params": 4,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_00,
        "edge_orientations": _EO_00,
        "edge_shape_ids": _ESI_00,
        "default_params": _DP_00,
        "vertex_coeffs": _TVC_00,
        "translation_coeffs": _TC_00,
        "aspect_coeffs": _AC_00,
        "coloring": _C_00,
    },
    2: {
        "num_params": 4,
        "num_aspects": 2,
        "num_vertices": 6,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_00,
        "edge_orientations": _EO_01,
        "edge_shape_ids": _ESI_01,
        "default_params": _DP_01,
        "vertex_coeffs": _TVC_01,
        "translation_coeffs": _TC_01,
        "aspect_coeffs": _AC_01,
        "coloring": _C_01,
    },
    3: {
        "num_params": 4,
        "num_aspects": 2,
        "num_vertices": 6,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_00,
        "edge_orientations": _EO_02,
        "edge_shape_ids": _ESI_02,
        "default_params": _DP_02,
        "vertex_coeffs": _TVC_02,
        "translation_coeffs": _TC_02,
        "aspect_coeffs": _AC_02,
        "coloring": _C_02,
    },
    4: {
        "num_params": 6,
        "num_aspects": 2,
        "num_vertices": 6,
        "num_edge_shapes": 5,
        "edge_shapes": _ES_01,
        "edge_orientations": _EO_03,
        "edge_shape_ids": _ESI_03,
        "default_params": _DP_03,
        "vertex_coeffs": _TVC_03,
        "translation_coeffs": _TC_03,
        "aspect_coeffs": _AC_03,
        "coloring": _C_02,
    },
    5: {
        "num_params": 5,
        "num_aspects": 4,
        "num_vertices": 6,
        "num_edge_shapes": 4,
        "edge_shapes": _ES_02,
        "edge_orientations": _EO_04,
        "edge_shape_ids": _ESI_04,
        "default_params": _DP_04,
        "vertex_coeffs": _TVC_04,
        "translation_coeffs": _TC_04,
        "aspect_coeffs": _AC_04,
        "coloring": _C_03,
    },
    6: {
        "num_params": 5,
        "num_aspects": 4,
        "num_vertices": 6,
        "num_edge_shapes": 4,
        "edge_shapes": _ES_03,
        "edge_orientations": _EO_05,
        "edge_shape_ids": _ESI_05,
        "default_params": _DP_05,
        "vertex_coeffs": _TVC_05,
        "translation_coeffs": _TC_05,
        "aspect_coeffs": _AC_05,
        "coloring": _C_04,
    },
    7: {
        "num_params": 2,
        "num_aspects": 3,
        "num_vertices": 6,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_00,
        "edge_orientations": _EO_06,
        "edge_shape_ids": _ESI_06,
        "default_params": _DP_06,
        "vertex_coeffs": _TVC_06,
        "translation_coeffs": _TC_06,
        "aspect_coeffs": _AC_06,
        "coloring": _C_05,
    },
    8: {
        "num_params": 4,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_04,
        "edge_orientations": _EO_07,
        "edge_shape_ids": _ESI_00,
        "default_params": _DP_00,
        "vertex_coeffs": _TVC_00,
        "translation_coeffs": _TC_00,
        "aspect_coeffs": _AC_00,
        "coloring": _C_00,
    },
    9: {
        "num_params": 3,
        "num_aspects": 2,
        "num_vertices": 6,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_05,
        "edge_orientations": _EO_08,
        "edge_shape_ids": _ESI_07,
        "default_params": _DP_07,
        "vertex_coeffs": _TVC_07,
        "translation_coeffs": _TC_07,
        "aspect_coeffs": _AC_07,
        "coloring": _C_06,
    },
    10: {
        "num_params": 0,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_06,
        "edge_orientations": _EO_06,
        "edge_shape_ids": _ESI_08,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_08,
        "translation_coeffs": _TC_08,
        "aspect_coeffs": _AC_08,
        "coloring": _C_00,
    },
    11: {
        "num_params": 0,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_07,
        "edge_orientations": _EO_07,
        "edge_shape_ids": _ESI_08,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_08,
        "translation_coeffs": _TC_09,
        "aspect_coeffs": _AC_08,
        "coloring": _C_00,
    },
    12: {
        "num_params": 2,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_08,
        "edge_orientations": _EO_09,
        "edge_shape_ids": _ESI_07,
        "default_params": _DP_09,
        "vertex_coeffs": _TVC_09,
        "translation_coeffs": _TC_10,
        "aspect_coeffs": _AC_09,
        "coloring": _C_00,
    },
    13: {
        "num_params": 3,
        "num_aspects": 2,
        "num_vertices": 6,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_09,
        "edge_orientations": _EO_10,
        "edge_shape_ids": _ESI_09,
        "default_params": _DP_10,
        "vertex_coeffs": _TVC_10,
        "translation_coeffs": _TC_11,
        "aspect_coeffs": _AC_10,
        "coloring": _C_06,
    },
    14: {
        "num_params": 2,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_10,
        "edge_orientations": _EO_11,
        "edge_shape_ids": _ESI_10,
        "default_params": _DP_09,
        "vertex_coeffs": _TVC_11,
        "translation_coeffs": _TC_12,
        "aspect_coeffs": _AC_09,
        "coloring": _C_00,
    },
    15: {
        "num_params": 3,
        "num_aspects": 2,
        "num_vertices": 6,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_11,
        "edge_orientations": _EO_12,
        "edge_shape_ids": _ESI_11,
        "default_params": _DP_11,
        "vertex_coeffs": _TVC_12,
        "translation_coeffs": _TC_13,
        "aspect_coeffs": _AC_11,
        "coloring": _C_06,
    },
    16: {
        "num_params": 1,
        "num_aspects": 3,
        "num_vertices": 6,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_12,
        "edge_orientations": _EO_13,
        "edge_shape_ids": _ESI_12,
        "default_params": _DP_12,
        "vertex_coeffs": _TVC_13,
        "translation_coeffs": _TC_14,
        "aspect_coeffs": _AC_12,
        "coloring": _C_05,
    },
    17: {
        "num_params": 2,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_13,
        "edge_orientations": _EO_14,
        "edge_shape_ids": _ESI_07,
        "default_params": _DP_09,
        "vertex_coeffs": _TVC_09,
        "translation_coeffs": _TC_10,
        "aspect_coeffs": _AC_09,
        "coloring": _C_00,
    },
    18: {
        "num_params": 0,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_14,
        "edge_orientations": _EO_06,
        "edge_shape_ids": _ESI_08,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_08,
        "translation_coeffs": _TC_09,
        "aspect_coeffs": _AC_08,
        "coloring": _C_00,
    },
    20: {
        "num_params": 0,
        "num_aspects": 1,
        "num_vertices": 6,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_15,
        "edge_orientations": _EO_07,
        "edge_shape_ids": _ESI_08,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_08,
        "translation_coeffs": _TC_09,
        "aspect_coeffs": _AC_08,
        "coloring": _C_00,
    },
    21: {
        "num_params": 2,
        "num_aspects": 6,
        "num_vertices": 5,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_16,
        "edge_orientations": _EO_15,
        "edge_shape_ids": _ESI_13,
        "default_params": _DP_13,
        "vertex_coeffs": _TVC_14,
        "translation_coeffs": _TC_15,
        "aspect_coeffs": _AC_13,
        "coloring": _C_07,
    },
    22: {
        "num_params": 3,
        "num_aspects": 2,
        "num_vertices": 5,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_17,
        "edge_orientations": _EO_16,
        "edge_shape_ids": _ESI_14,
        "default_params": _DP_14,
        "vertex_coeffs": _TVC_15,
        "translation_coeffs": _TC_16,
        "aspect_coeffs": _AC_14,
        "coloring": _C_06,
    },
    23: {
        "num_params": 4,
        "num_aspects": 2,
        "num_vertices": 5,
        "num_edge_shapes": 4,
        "edge_shapes": _ES_18,
        "edge_orientations": _EO_17,
        "edge_shape_ids": _ESI_15,
        "default_params": _DP_15,
        "vertex_coeffs": _TVC_16,
        "translation_coeffs": _TC_17,
        "aspect_coeffs": _AC_15,
        "coloring": _C_08,
    },
    24: {
        "num_params": 4,
        "num_aspects": 4,
        "num_vertices": 5,
        "num_edge_shapes": 4,
        "edge_shapes": _ES_19,
        "edge_orientations": _EO_17,
        "edge_shape_ids": _ESI_15,
        "default_params": _DP_15,
        "vertex_coeffs": _TVC_16,
        "translation_coeffs": _TC_18,
        "aspect_coeffs": _AC_16,
        "coloring": _C_09,
    },
    25: {
        "num_params": 3,
        "num_aspects": 4,
        "num_vertices": 5,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_20,
        "edge_orientations": _EO_16,
        "edge_shape_ids": _ESI_14,
        "default_params": _DP_14,
        "vertex_coeffs": _TVC_15,
        "translation_coeffs": _TC_19,
        "aspect_coeffs": _AC_17,
        "coloring": _C_10,
    },
    26: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 5,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_21,
        "edge_orientations": _EO_18,
        "edge_shape_ids": _ESI_14,
        "default_params": _DP_16,
        "vertex_coeffs": _TVC_17,
        "translation_coeffs": _TC_20,
        "aspect_coeffs": _AC_18,
        "coloring": _C_01,
    },
    27: {
        "num_params": 3,
        "num_aspects": 4,
        "num_vertices": 5,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_16,
        "edge_orientations": _EO_19,
        "edge_shape_ids": _ESI_16,
        "default_params": _DP_17,
        "vertex_coeffs": _TVC_18,
        "translation_coeffs": _TC_21,
        "aspect_coeffs": _AC_19,
        "coloring": _C_11,
    },
    28: {
        "num_params": 2,
        "num_aspects": 4,
        "num_vertices": 5,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_16,
        "edge_orientations": _EO_15,
        "edge_shape_ids": _ESI_13,
        "default_params": _DP_18,
        "vertex_coeffs": _TVC_19,
        "translation_coeffs": _TC_22,
        "aspect_coeffs": _AC_20,
        "coloring": _C_12,
    },
    29: {
        "num_params": 1,
        "num_aspects": 4,
        "num_vertices": 5,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_12,
        "edge_orientations": _EO_20,
        "edge_shape_ids": _ESI_17,
        "default_params": _DP_19,
        "vertex_coeffs": _TVC_20,
        "translation_coeffs": _TC_23,
        "aspect_coeffs": _AC_21,
        "coloring": _C_04,
    },
    30: {
        "num_params": 1,
        "num_aspects": 6,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_22,
        "edge_orientations": _EO_21,
        "edge_shape_ids": _ESI_18,
        "default_params": _DP_20,
        "vertex_coeffs": _TVC_21,
        "translation_coeffs": _TC_24,
        "aspect_coeffs": _AC_22,
        "coloring": _C_13,
    },
    31: {
        "num_params": 0,
        "num_aspects": 6,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_23,
        "edge_orientations": _EO_22,
        "edge_shape_ids": _ESI_19,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_22,
        "translation_coeffs": _TC_25,
        "aspect_coeffs": _AC_23,
        "coloring": _C_14,
    },
    32: {
        "num_params": 0,
        "num_aspects": 6,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_24,
        "edge_orientations": _EO_23,
        "edge_shape_ids": _ESI_19,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_22,
        "translation_coeffs": _TC_26,
        "aspect_coeffs": _AC_24,
        "coloring": _C_15,
    },
    33: {
        "num_params": 0,
        "num_aspects": 3,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_23,
        "edge_orientations": _EO_22,
        "edge_shape_ids": _ESI_19,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_23,
        "translation_coeffs": _TC_08,
        "aspect_coeffs": _AC_25,
        "coloring": _C_05,
    },
    34: {
        "num_params": 0,
        "num_aspects": 3,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_06,
        "edge_orientations": _EO_24,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_23,
        "translation_coeffs": _TC_09,
        "aspect_coeffs": _AC_26,
        "coloring": _C_05,
    },
    36: {
        "num_params": 0,
        "num_aspects": 3,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_06,
        "edge_orientations": _EO_25,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_23,
        "translation_coeffs": _TC_08,
        "aspect_coeffs": _AC_27,
        "coloring": _C_05,
    },
    37: {
        "num_params": 0,
        "num_aspects": 3,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_15,
        "edge_orientations": _EO_26,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_23,
        "translation_coeffs": _TC_08,
        "aspect_coeffs": _AC_28,
        "coloring": _C_05,
    },
    38: {
        "num_params": 0,
        "num_aspects": 6,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_10,
        "edge_orientations": _EO_27,
        "edge_shape_ids": _ESI_21,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_24,
        "translation_coeffs": _TC_27,
        "aspect_coeffs": _AC_29,
        "coloring": _C_15,
    },
    39: {
        "num_params": 0,
        "num_aspects": 6,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_25,
        "edge_orientations": _EO_27,
        "edge_shape_ids": _ESI_21,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_24,
        "translation_coeffs": _TC_28,
        "aspect_coeffs": _AC_30,
        "coloring": _C_16,
    },
    40: {
        "num_params": 0,
        "num_aspects": 6,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_24,
        "edge_orientations": _EO_28,
        "edge_shape_ids": _ESI_21,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_24,
        "translation_coeffs": _TC_29,
        "aspect_coeffs": _AC_31,
        "coloring": _C_17,
    },
    41: {
        "num_params": 2,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_23,
        "edge_orientations": _EO_22,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_21,
        "vertex_coeffs": _TVC_25,
        "translation_coeffs": _TC_30,
        "aspect_coeffs": _AC_09,
        "coloring": _C_18,
    },
    42: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_22,
        "edge_orientations": _EO_29,
        "edge_shape_ids": _ESI_23,
        "default_params": _DP_21,
        "vertex_coeffs": _TVC_25,
        "translation_coeffs": _TC_31,
        "aspect_coeffs": _AC_32,
        "coloring": _C_19,
    },
    43: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_23,
        "edge_orientations": _EO_30,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_21,
        "vertex_coeffs": _TVC_25,
        "translation_coeffs": _TC_31,
        "aspect_coeffs": _AC_33,
        "coloring": _C_19,
    },
    44: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_23,
        "edge_orientations": _EO_31,
        "edge_shape_ids": _ESI_24,
        "default_params": _DP_22,
        "vertex_coeffs": _TVC_26,
        "translation_coeffs": _TC_32,
        "aspect_coeffs": _AC_34,
        "coloring": _C_20,
    },
    45: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_22,
        "edge_orientations": _EO_32,
        "edge_shape_ids": _ESI_23,
        "default_params": _DP_23,
        "vertex_coeffs": _TVC_27,
        "translation_coeffs": _TC_33,
        "aspect_coeffs": _AC_35,
        "coloring": _C_20,
    },
    46: {
        "num_params": 4,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 4,
        "edge_shapes": _ES_26,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_25,
        "default_params": _DP_24,
        "vertex_coeffs": _TVC_28,
        "translation_coeffs": _TC_34,
        "aspect_coeffs": _AC_36,
        "coloring": _C_20,
    },
    47: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_27,
        "edge_orientations": _EO_29,
        "edge_shape_ids": _ESI_23,
        "default_params": _DP_21,
        "vertex_coeffs": _TVC_25,
        "translation_coeffs": _TC_35,
        "aspect_coeffs": _AC_37,
        "coloring": _C_19,
    },
    49: {
        "num_params": 3,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 4,
        "edge_shapes": _ES_28,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_25,
        "default_params": _DP_25,
        "vertex_coeffs": _TVC_29,
        "translation_coeffs": _TC_36,
        "aspect_coeffs": _AC_38,
        "coloring": _C_21,
    },
    50: {
        "num_params": 2,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_29,
        "edge_orientations": _EO_29,
        "edge_shape_ids": _ESI_23,
        "default_params": _DP_21,
        "vertex_coeffs": _TVC_25,
        "translation_coeffs": _TC_37,
        "aspect_coeffs": _AC_39,
        "coloring": _C_22,
    },
    51: {
        "num_params": 3,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_27,
        "edge_orientations": _EO_32,
        "edge_shape_ids": _ESI_23,
        "default_params": _DP_26,
        "vertex_coeffs": _TVC_30,
        "translation_coeffs": _TC_38,
        "aspect_coeffs": _AC_40,
        "coloring": _C_21,
    },
    52: {
        "num_params": 1,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_23,
        "edge_orientations": _EO_34,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_20,
        "vertex_coeffs": _TVC_31,
        "translation_coeffs": _TC_39,
        "aspect_coeffs": _AC_41,
        "coloring": _C_23,
    },
    53: {
        "num_params": 3,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_27,
        "edge_orientations": _EO_35,
        "edge_shape_ids": _ESI_26,
        "default_params": _DP_27,
        "vertex_coeffs": _TVC_32,
        "translation_coeffs": _TC_40,
        "aspect_coeffs": _AC_42,
        "coloring": _C_21,
    },
    54: {
        "num_params": 2,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 4,
        "edge_shapes": _ES_30,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_25,
        "default_params": _DP_28,
        "vertex_coeffs": _TVC_33,
        "translation_coeffs": _TC_41,
        "aspect_coeffs": _AC_43,
        "coloring": _C_22,
    },
    55: {
        "num_params": 0,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_23,
        "edge_orientations": _EO_24,
        "edge_shape_ids": _ESI_24,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_34,
        "translation_coeffs": _TC_42,
        "aspect_coeffs": _AC_44,
        "coloring": _C_24,
    },
    56: {
        "num_params": 1,
        "num_aspects": 8,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_22,
        "edge_orientations": _EO_36,
        "edge_shape_ids": _ESI_26,
        "default_params": _DP_29,
        "vertex_coeffs": _TVC_35,
        "translation_coeffs": _TC_43,
        "aspect_coeffs": _AC_45,
        "coloring": _C_25,
    },
    57: {
        "num_params": 2,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_31,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_21,
        "vertex_coeffs": _TVC_25,
        "translation_coeffs": _TC_30,
        "aspect_coeffs": _AC_09,
        "coloring": _C_18,
    },
    58: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_32,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_21,
        "vertex_coeffs": _TVC_25,
        "translation_coeffs": _TC_31,
        "aspect_coeffs": _AC_32,
        "coloring": _C_19,
    },
    59: {
        "num_params": 1,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_06,
        "edge_orientations": _EO_31,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_30,
        "vertex_coeffs": _TVC_36,
        "translation_coeffs": _TC_44,
        "aspect_coeffs": _AC_46,
        "coloring": _C_20,
    },
    61: {
        "num_params": 0,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_06,
        "edge_orientations": _EO_24,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_34,
        "translation_coeffs": _TC_45,
        "aspect_coeffs": _AC_47,
        "coloring": _C_20,
    },
    62: {
        "num_params": 0,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_07,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_34,
        "translation_coeffs": _TC_46,
        "aspect_coeffs": _AC_08,
        "coloring": _C_18,
    },
    64: {
        "num_params": 1,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_33,
        "edge_orientations": _EO_37,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_20,
        "vertex_coeffs": _TVC_31,
        "translation_coeffs": _TC_47,
        "aspect_coeffs": _AC_48,
        "coloring": _C_18,
    },
    66: {
        "num_params": 1,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_34,
        "edge_orientations": _EO_37,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_20,
        "vertex_coeffs": _TVC_31,
        "translation_coeffs": _TC_48,
        "aspect_coeffs": _AC_49,
        "coloring": _C_19,
    },
    67: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_21,
        "edge_orientations": _EO_38,
        "edge_shape_ids": _ESI_23,
        "default_params": _DP_23,
        "vertex_coeffs": _TVC_27,
        "translation_coeffs": _TC_49,
        "aspect_coeffs": _AC_50,
        "coloring": _C_20,
    },
    68: {
        "num_params": 1,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_06,
        "edge_orientations": _EO_39,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_30,
        "vertex_coeffs": _TVC_36,
        "translation_coeffs": _TC_50,
        "aspect_coeffs": _AC_48,
        "coloring": _C_18,
    },
    69: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_31,
        "edge_orientations": _EO_26,
        "edge_shape_ids": _ESI_24,
        "default_params": _DP_22,
        "vertex_coeffs": _TVC_26,
        "translation_coeffs": _TC_32,
        "aspect_coeffs": _AC_51,
        "coloring": _C_20,
    },
    71: {
        "num_params": 0,
        "num_aspects": 4,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_06,
        "edge_orientations": _EO_40,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_34,
        "translation_coeffs": _TC_42,
        "aspect_coeffs": _AC_52,
        "coloring": _C_24,
    },
    72: {
        "num_params": 1,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_24,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_22,
        "default_params": _DP_20,
        "vertex_coeffs": _TVC_31,
        "translation_coeffs": _TC_47,
        "aspect_coeffs": _AC_48,
        "coloring": _C_18,
    },
    73: {
        "num_params": 0,
        "num_aspects": 2,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_14,
        "edge_orientations": _EO_24,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_34,
        "translation_coeffs": _TC_45,
        "aspect_coeffs": _AC_47,
        "coloring": _C_20,
    },
    74: {
        "num_params": 1,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_07,
        "edge_orientations": _EO_26,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_30,
        "vertex_coeffs": _TVC_36,
        "translation_coeffs": _TC_50,
        "aspect_coeffs": _AC_48,
        "coloring": _C_18,
    },
    76: {
        "num_params": 0,
        "num_aspects": 1,
        "num_vertices": 4,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_15,
        "edge_orientations": _EO_33,
        "edge_shape_ids": _ESI_20,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_34,
        "translation_coeffs": _TC_46,
        "aspect_coeffs": _AC_08,
        "coloring": _C_18,
    },
    77: {
        "num_params": 0,
        "num_aspects": 12,
        "num_vertices": 3,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_35,
        "edge_orientations": _EO_41,
        "edge_shape_ids": _ESI_27,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_37,
        "translation_coeffs": _TC_51,
        "aspect_coeffs": _AC_53,
        "coloring": _C_26,
    },
    78: {
        "num_params": 1,
        "num_aspects": 4,
        "num_vertices": 3,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_36,
        "edge_orientations": _EO_41,
        "edge_shape_ids": _ESI_27,
        "default_params": _DP_20,
        "vertex_coeffs": _TVC_38,
        "translation_coeffs": _TC_52,
        "aspect_coeffs": _AC_54,
        "coloring": _C_22,
    },
    79: {
        "num_params": 0,
        "num_aspects": 4,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_25,
        "edge_orientations": _EO_27,
        "edge_shape_ids": _ESI_21,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_39,
        "translation_coeffs": _TC_53,
        "aspect_coeffs": _AC_55,
        "coloring": _C_27,
    },
    81: {
        "num_params": 0,
        "num_aspects": 8,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_10,
        "edge_orientations": _EO_27,
        "edge_shape_ids": _ESI_21,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_39,
        "translation_coeffs": _TC_54,
        "aspect_coeffs": _AC_56,
        "coloring": _C_25,
    },
    82: {
        "num_params": 0,
        "num_aspects": 4,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_24,
        "edge_orientations": _EO_28,
        "edge_shape_ids": _ESI_21,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_39,
        "translation_coeffs": _TC_55,
        "aspect_coeffs": _AC_57,
        "coloring": _C_27,
    },
    83: {
        "num_params": 1,
        "num_aspects": 2,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_10,
        "edge_orientations": _EO_42,
        "edge_shape_ids": _ESI_28,
        "default_params": _DP_31,
        "vertex_coeffs": _TVC_40,
        "translation_coeffs": _TC_56,
        "aspect_coeffs": _AC_58,
        "coloring": _C_20,
    },
    84: {
        "num_params": 2,
        "num_aspects": 2,
        "num_vertices": 3,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_04,
        "edge_orientations": _EO_41,
        "edge_shape_ids": _ESI_27,
        "default_params": _DP_32,
        "vertex_coeffs": _TVC_41,
        "translation_coeffs": _TC_57,
        "aspect_coeffs": _AC_59,
        "coloring": _C_20,
    },
    85: {
        "num_params": 2,
        "num_aspects": 4,
        "num_vertices": 3,
        "num_edge_shapes": 3,
        "edge_shapes": _ES_37,
        "edge_orientations": _EO_41,
        "edge_shape_ids": _ESI_27,
        "default_params": _DP_32,
        "vertex_coeffs": _TVC_41,
        "translation_coeffs": _TC_58,
        "aspect_coeffs": _AC_60,
        "coloring": _C_21,
    },
    86: {
        "num_params": 1,
        "num_aspects": 4,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_25,
        "edge_orientations": _EO_42,
        "edge_shape_ids": _ESI_28,
        "default_params": _DP_31,
        "vertex_coeffs": _TVC_40,
        "translation_coeffs": _TC_59,
        "aspect_coeffs": _AC_61,
        "coloring": _C_21,
    },
    88: {
        "num_params": 0,
        "num_aspects": 6,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_25,
        "edge_orientations": _EO_43,
        "edge_shape_ids": _ESI_28,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_42,
        "translation_coeffs": _TC_60,
        "aspect_coeffs": _AC_62,
        "coloring": _C_28,
    },
    90: {
        "num_params": 0,
        "num_aspects": 2,
        "num_vertices": 3,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_07,
        "edge_orientations": _EO_41,
        "edge_shape_ids": _ESI_29,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_42,
        "translation_coeffs": _TC_09,
        "aspect_coeffs": _AC_63,
        "coloring": _C_20,
    },
    91: {
        "num_params": 1,
        "num_aspects": 2,
        "num_vertices": 3,
        "num_edge_shapes": 2,
        "edge_shapes": _ES_32,
        "edge_orientations": _EO_44,
        "edge_shape_ids": _ESI_28,
        "default_params": _DP_31,
        "vertex_coeffs": _TVC_40,
        "translation_coeffs": _TC_61,
        "aspect_coeffs": _AC_64,
        "coloring": _C_20,
    },
    93: {
        "num_params": 0,
        "num_aspects": 2,
        "num_vertices": 3,
        "num_edge_shapes": 1,
        "edge_shapes": _ES_15,
        "edge_orientations": _EO_41,
        "edge_shape_ids": _ESI_29,
        "default_params": _DP_08,
        "vertex_coeffs": _TVC_42,
        "translation_coeffs": _TC_09,
        "aspect_coeffs": _AC_63,
        "coloring": _C_20,
    },
}
