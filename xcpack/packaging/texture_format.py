"""
Texture Format - 纹理格式选择

iOS has no BC (block compression) support; compressed formats are swapped for
the nearest uncompressed format before the texture is cooked.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Union


class PixelFormat(Enum):
    UNKNOWN = 0

    # 未压缩
    R8_Typeless = 1
    R8_UNorm = 2
    R8_SNorm = 3
    R8G8B8A8_Typeless = 4
    R8G8B8A8_UNorm = 5
    R8G8B8A8_UNorm_sRGB = 6
    R16G16_Typeless = 7
    R16G16_UNorm = 8
    R16G16_SNorm = 9
    R16G16B16A16_Typeless = 10
    R16G16B16A16_Float = 11
    R16G16B16A16_UNorm = 12
    R32_Float = 13
    B8G8R8A8_UNorm = 14

    # BC 压缩
    BC1_Typeless = 20
    BC1_UNorm = 21
    BC1_UNorm_sRGB = 22
    BC2_Typeless = 23
    BC2_UNorm = 24
    BC2_UNorm_sRGB = 25
    BC3_Typeless = 26
    BC3_UNorm = 27
    BC3_UNorm_sRGB = 28
    BC4_Typeless = 29
    BC4_UNorm = 30
    BC4_SNorm = 31
    BC5_Typeless = 32
    BC5_UNorm = 33
    BC5_SNorm = 34
    BC6H_Typeless = 35
    BC6H_Uf16 = 36
    BC6H_Sf16 = 37
    BC7_Typeless = 38
    BC7_UNorm = 39
    BC7_UNorm_sRGB = 40


P = PixelFormat

DOWNGRADE_TABLE: Dict[PixelFormat, PixelFormat] = {
    P.BC1_Typeless: P.R8G8B8A8_Typeless,
    P.BC2_Typeless: P.R8G8B8A8_Typeless,
    P.BC3_Typeless: P.R8G8B8A8_Typeless,
    P.BC1_UNorm: P.R8G8B8A8_UNorm,
    P.BC2_UNorm: P.R8G8B8A8_UNorm,
    P.BC3_UNorm: P.R8G8B8A8_UNorm,
    P.BC1_UNorm_sRGB: P.R8G8B8A8_UNorm_sRGB,
    P.BC2_UNorm_sRGB: P.R8G8B8A8_UNorm_sRGB,
    P.BC3_UNorm_sRGB: P.R8G8B8A8_UNorm_sRGB,
    P.BC4_Typeless: P.R8_Typeless,
    P.BC4_UNorm: P.R8_UNorm,
    P.BC4_SNorm: P.R8_SNorm,
    P.BC5_Typeless: P.R16G16_Typeless,
    P.BC5_UNorm: P.R16G16_UNorm,
    P.BC5_SNorm: P.R16G16_SNorm,
    P.BC7_Typeless: P.R16G16B16A16_Typeless,
    P.BC6H_Typeless: P.R16G16B16A16_Typeless,
    P.BC7_UNorm: P.R16G16B16A16_Float,
    P.BC6H_Uf16: P.R16G16B16A16_Float,
    P.BC6H_Sf16: P.R16G16B16A16_Float,
    P.BC7_UNorm_sRGB: P.R16G16B16A16_UNorm,
}


def is_compressed_bc(fmt: PixelFormat) -> bool:
    return fmt.name.startswith("BC")


def parse_format(value: Union[str, PixelFormat]) -> PixelFormat:
    """按名称解析（大小写不敏感）"""
    if isinstance(value, PixelFormat):
        return value
    for fmt in PixelFormat:
        if fmt.name.lower() == value.strip().lower():
            return fmt
    raise ValueError(f"Unknown pixel format: {value}")


def downgrade(fmt: Union[str, PixelFormat]) -> PixelFormat:
    """Map a BC format to its uncompressed equivalent; other formats pass through."""
    fmt = parse_format(fmt)
    if is_compressed_bc(fmt):
        return DOWNGRADE_TABLE.get(fmt, fmt)
    return fmt
