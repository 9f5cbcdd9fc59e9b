"""
Tests for packaging configuration
"""
import json


class TestPackagingConfig:
    """测试打包配置"""

    def test_defaults(self):
        from xcpack.packaging.platform_settings import PackagingConfig

        config = PackagingConfig()
        assert config.ios.app_identifier == "com.${COMPANY_NAME}.${PROJECT_NAME}"
        assert config.ios.app_version == "1"
        assert config.build.game_folder == "Game"
        assert not config.build.skip_packaging

    def test_save_and_load(self, tmp_path):
        from xcpack.packaging.platform_settings import PackagingConfig

        config = PackagingConfig()
        config.game.product_name = "Shooter"
        config.ios.app_team_id = "TEAM"
        config.build.debug = True
        config.save(tmp_path / "cfg" / "ios.json")

        loaded = PackagingConfig.load(tmp_path / "cfg" / "ios.json")
        assert loaded == config

    def test_partial_and_unknown_keys(self):
        from xcpack.packaging.platform_settings import PackagingConfig

        config = PackagingConfig.from_json(json.dumps({
            "game": {"product_name": "Shooter", "legacy": 1},
            "build": {"skip_packaging": True},
        }))
        assert config.game.product_name == "Shooter"
        assert config.game.company_name == "Company"
        assert config.build.skip_packaging
        assert config.ios.app_version == "1"

    def test_load_packaging_config_default(self):
        from xcpack.packaging.platform_settings import PackagingConfig, load_packaging_config

        assert load_packaging_config(None) == PackagingConfig()
