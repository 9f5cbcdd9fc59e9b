"""
Tests for iOS texture format selection
"""
import pytest


class TestDowngrade:
    """测试纹理格式降级"""

    def test_rgba_block_formats(self):
        from xcpack.packaging.texture_format import PixelFormat, downgrade

        assert downgrade(PixelFormat.BC1_UNorm) == PixelFormat.R8G8B8A8_UNorm
        assert downgrade(PixelFormat.BC3_UNorm_sRGB) == PixelFormat.R8G8B8A8_UNorm_sRGB
        assert downgrade(PixelFormat.BC2_Typeless) == PixelFormat.R8G8B8A8_Typeless

    def test_single_and_two_channel(self):
        from xcpack.packaging.texture_format import PixelFormat, downgrade

        assert downgrade(PixelFormat.BC4_SNorm) == PixelFormat.R8_SNorm
        assert downgrade(PixelFormat.BC4_UNorm) == PixelFormat.R8_UNorm
        assert downgrade(PixelFormat.BC5_SNorm) == PixelFormat.R16G16_SNorm
        assert downgrade(PixelFormat.BC5_Typeless) == PixelFormat.R16G16_Typeless

    def test_hdr_formats(self):
        from xcpack.packaging.texture_format import PixelFormat, downgrade

        assert downgrade(PixelFormat.BC6H_Uf16) == PixelFormat.R16G16B16A16_Float
        assert downgrade(PixelFormat.BC6H_Sf16) == PixelFormat.R16G16B16A16_Float
        assert downgrade(PixelFormat.BC7_UNorm) == PixelFormat.R16G16B16A16_Float
        assert downgrade(PixelFormat.BC7_UNorm_sRGB) == PixelFormat.R16G16B16A16_UNorm
        assert downgrade(PixelFormat.BC6H_Typeless) == PixelFormat.R16G16B16A16_Typeless

    def test_total_and_idempotent(self):
        from xcpack.packaging.texture_format import PixelFormat, downgrade, is_compressed_bc

        for fmt in PixelFormat:
            once = downgrade(fmt)
            assert downgrade(once) == once
            if is_compressed_bc(fmt):
                assert not is_compressed_bc(once)
            else:
                assert once == fmt

    def test_every_bc_format_has_a_mapping(self):
        from xcpack.packaging.texture_format import DOWNGRADE_TABLE, PixelFormat, is_compressed_bc

        compressed = {fmt for fmt in PixelFormat if is_compressed_bc(fmt)}
        assert compressed == set(DOWNGRADE_TABLE)

    def test_parse_by_name(self):
        from xcpack.packaging.texture_format import PixelFormat, downgrade

        assert downgrade("bc3_unorm") == PixelFormat.R8G8B8A8_UNorm
        with pytest.raises(ValueError):
            downgrade("ASTC_4x4")
