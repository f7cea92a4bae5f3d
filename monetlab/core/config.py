#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: monetlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for viewing-condition derivation cache
LRU_CACHE_SIZE = 64

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
XYZ_SCALING = 100.0                # Factor for normalizing/scaling XYZ coordinates
ALPHA_OPAQUE = 0xFF000000          # ARGB alpha channel for a fully opaque color
MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB_R = (3.2404542, -1.5371385, -0.4985314)  # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.9692660, 1.8760108, 0.0415560)   # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.0556434, -0.2040259, 1.0572252)   # Coefficients for linear Blue component calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_INV_THR = 0.20689655           # Threshold for inverse conversion (Lab to XYZ)
LAB_MID_GRAY_L = 50.0              # L* of the gray-world background

# Izazbz Constants (Source: Safdar et al. 2021, ZCAM / Jzazbz 2017)
IZ_B = 1.15                        # X' blue-yellow correction factor
IZ_G = 0.66                        # Y' red-green correction factor
IZ_EPSILON = 3.7035226210190005e-11  # Offset that maps absolute black to Iz = 0
M_XYZ_LMS = (
    (0.41478972, 0.579999, 0.0146480),    # L cone response from X'Y'Z
    (-0.2015100, 1.120649, 0.0531008),    # M cone response from X'Y'Z
    (-0.0166008, 0.264800, 0.6684799),    # S cone response from X'Y'Z
)
M_LMS_AZ = (3.524000, -4.066708, 0.542708)    # Red-green opponent weights
M_LMS_BZ = (0.199076, 1.096799, -1.295875)    # Yellow-blue opponent weights

# Perceptual Quantizer (Source: SMPTE ST 2084, exponent p modified for ZCAM)
PQ_C1 = 3424.0 / 4096.0
PQ_C2 = 2413.0 / 128.0
PQ_C3 = 2392.0 / 128.0
PQ_N = 2610.0 / 16384.0
PQ_P = 1.7 * 2523.0 / 32.0
PQ_PEAK = 10000.0                  # Peak luminance of the PQ curve (cd/m^2)

# ZCAM Appearance Constants (Source: Safdar et al. 2021)
SURROUND_DARK = 0.525
SURROUND_DIM = 0.59
SURROUND_AVERAGE = 0.69
ZCAM_QZ_COEFF = 2700.0             # Brightness scale
ZCAM_QZ_EXP = 1.6                  # Brightness exponent numerator (times Fs)
ZCAM_FS_EXP = 2.2                  # Surround exponent in brightness
ZCAM_FB_QZ_EXP = 0.12              # Background exponent in brightness power
ZCAM_FL_EXP = 0.2                  # Luminance-level adaptation exponent
ZCAM_FL_COEFF = 0.171              # Luminance-level adaptation scale
ZCAM_FL_DECAY = 48.0 / 9.0         # Luminance-level adaptation decay
ZCAM_EZ_OFFSET = 1.015             # Eccentricity offset
ZCAM_EZ_PHASE = 89.038             # Eccentricity hue phase (degrees)
ZCAM_MZ_EXP = 0.37                 # Colorfulness exponent on az/bz magnitude
ZCAM_EZ_EXP = 0.068                # Colorfulness exponent on eccentricity
ZCAM_FB_MZ_EXP = 0.1               # Background exponent in colorfulness
ZCAM_IZW_EXP = 0.78                # Reference white Iz exponent in colorfulness
ZCAM_SCALE = 100.0                 # Lightness and chroma scale

# ==========================================
# Viewing Conditions & White Luminance
# ==========================================

WHITE_LUMINANCE_MIN = 1.0          # Dimmest reference white (cd/m^2)
WHITE_LUMINANCE_MAX = 10000.0      # Brightest reference white (cd/m^2)
WHITE_LUMINANCE_USER_MAX = 1000    # Upper bound of the user slider
WHITE_LUMINANCE_USER_DEFAULT = 425 # ~200.0 divisible by step (decoded = 199.526)
ADAPTING_LUMINANCE_RATIO = 0.4     # Adapting field relative to white (sRGB ambient)

# ==========================================
# Tonal Targets
# ==========================================

# Device-referred lightness per shade, also used as the CIELAB L* ladder
LINEAR_LIGHTNESS_MAP = {
    0: 100.0,
    10: 99.0,
    20: 98.0,
    50: 95.0,
    100: 90.0,
    200: 80.0,
    300: 70.0,
    400: 60.0,
    500: 50.0,
    600: 40.0,
    650: 35.0,
    700: 30.0,
    800: 20.0,
    900: 10.0,
    950: 5.0,
    1000: 0.0,
}

# AOSP default for shade 500 in CIELAB mode
CIELAB_LIGHTNESS_OVERRIDES = {500: 49.6}

# Accent swatch from Pixel defaults (shades 100-900), used as chroma reference
REF_ACCENT1_COLORS = (
    0xD3E3FD,
    0xA8C7FA,
    0x7CACF8,
    0x4C8DF6,
    0x1B6EF3,
    0x0B57D0,
    0x0842A0,
    0x062E6F,
    0x041E49,
)

ACCENT1_REF_CHROMA_FACTOR = 1.2    # Boost to get closer to the Pixel default
ACCENT2_CHROMA_DIVISOR = 3.0       # accent2 = accent1 / 3
ACCENT3_CHROMA_MULT = 2.0          # accent3 = accent2 * 2
NEUTRAL1_CHROMA_DIVISOR = 12.0     # neutral1 = accent1 / 12
NEUTRAL2_CHROMA_MULT = 2.0         # neutral2 = neutral1 * 2

ACCENT3_HUE_SHIFT_DEGREES = 60.0   # Shift by a secondary color

CHROMA_FACTOR_DEFAULT = 100.0      # Percent
CHROMA_FACTOR_NONE = 0.0
PERCENT_TO_FACTOR = 100.0

# ==========================================
# Gamut Reduction
# ==========================================

GAMUT_MAP_BINARY_SEARCH_ITERATIONS = 24  # Bisection steps for chroma-based gamut mapping
RGB_CLAMP_TOLERANCE_LOWER = -0.5         # Lower bound tolerance for gamut mapping and rounding
RGB_CLAMP_TOLERANCE_UPPER = 255.5        # Upper bound tolerance for gamut mapping and rounding
ADAPTIVE_CLIP_ALPHA = 5.0                # Pull of the achromatic anchor toward mid-lightness
ADAPTIVE_CLIP_MID = 0.5                  # Normalized mid-lightness of the anchor
ADAPTIVE_CLIP_MAX_DRIFT = 0.25          # Share of the gap to a neighbouring shade lightness may drift

# ==========================================
# Palette Families & Settings
# ==========================================

ACCENT = "accent"
NEUTRAL = "neutral"
FAMILIES = (ACCENT, NEUTRAL)
ACCENT_GROUP_COUNT = 3
NEUTRAL_GROUP_COUNT = 2

PREF_PREFIX = "monet_engine"
PREF_CUSTOM_COLOR = f"{PREF_PREFIX}_custom_color"
PREF_COLOR_OVERRIDE = f"{PREF_PREFIX}_color_override"
PREF_CHROMA_FACTOR = f"{PREF_PREFIX}_chroma_factor"
PREF_ACCURATE_SHADES = f"{PREF_PREFIX}_accurate_shades"
PREF_LINEAR_LIGHTNESS = f"{PREF_PREFIX}_linear_lightness"
PREF_WHITE_LUMINANCE = f"{PREF_PREFIX}_white_luminance_user"
PREF_COLOR_ACCENT = f"{PREF_PREFIX}_color_accent"
PREF_RICHER_COLORS = f"{PREF_PREFIX}_richer_colors"
PREF_TINT_SURFACE = f"{PREF_PREFIX}_tint_surface"

# Seed used when no wallpaper color has been supplied yet
DEFAULT_SEED_COLOR = 0x1B6EF3

# Token maps retained by the in-memory sink
TOKEN_SINK_HISTORY = 32

# ==========================================
# CLI UI & Data Structures
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "debug": "\033[1;35m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
    "debug": "\033[0;35m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"

# ==========================================
# Token Aliases
# ==========================================

# (token, group ordinal within family starting at 0, shade)
RICHER_ACCENT_ALIASES = (
    # accent1
    ("accent-device-default-dark", 0, 300),
    ("accent-primary-device-default", 0, 300),
    ("accent-primary-variant-dark-device-default", 0, 400),
    ("accent-device-default-light", 0, 500),
    ("accent-primary-variant-light-device-default", 0, 500),
    # accent2
    ("accent-secondary-device-default", 1, 300),
    ("accent-secondary-variant-dark-device-default", 1, 400),
    ("accent-secondary-variant-light-device-default", 1, 500),
    # accent3
    ("accent-tertiary-device-default", 2, 300),
    ("accent-tertiary-variant-dark-device-default", 2, 400),
    ("accent-tertiary-variant-light-device-default", 2, 500),
    # Holo blue
    ("holo-blue-bright", 0, 200),
    ("holo-blue-light", 0, 300),
    ("holo-blue-dark", 0, 500),
    # Material deep teal
    ("material-deep-teal-200", 0, 300),
    ("material-deep-teal-500", 0, 500),
)

LEGACY_ACCENT_ALIASES = (
    ("holo-blue-bright", 0, 100),
    ("holo-blue-light", 0, 200),
    ("holo-blue-dark", 0, 500),
    ("material-deep-teal-200", 0, 200),
    ("material-deep-teal-500", 0, 500),
)

# Modulated surfaces, fixed for performance and consistency
SURFACE_ALIASES = (
    ("surface-light", 0, 20),              # L* 98
    ("surface-highlight-dark", 0, 650),    # L* 35
    ("surface-header-dark", 0, 950),       # L* 5
)

# (richer_colors, family) -> aliases
ALIAS_TABLE = {
    (True, ACCENT): RICHER_ACCENT_ALIASES,
    (False, ACCENT): LEGACY_ACCENT_ALIASES,
    (True, NEUTRAL): SURFACE_ALIASES,
    (False, NEUTRAL): SURFACE_ALIASES,
}
