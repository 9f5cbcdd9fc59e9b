"""
Tests for app identifier resolution
"""
import pytest


class TestCleanName:
    """测试名称清理"""

    @pytest.mark.parametrize("name", ["My Game", "My.Game", "My-Game", " My .-Game- "])
    def test_strips_spaces_dots_hyphens(self, name):
        from xcpack.packaging.bundle_id import clean_name

        cleaned = clean_name(name)
        assert cleaned == "MyGame"
        for ch in " .-":
            assert ch not in cleaned

    def test_app_name(self):
        from xcpack.packaging.bundle_id import get_app_name

        assert get_app_name("Space Shooter 2.0-beta") == "SpaceShooter20beta"


class TestResolveAppIdentifier:
    """测试标识符解析"""

    def test_default_template(self):
        from xcpack.packaging.bundle_id import resolve_app_identifier

        identifier = resolve_app_identifier(
            "com.${COMPANY_NAME}.${PROJECT_NAME}", "My.Game-1", "Acme Inc"
        )
        assert identifier == "com.acmeinc.mygame1"

    def test_tokens_are_case_insensitive(self):
        from xcpack.packaging.bundle_id import resolve_app_identifier

        identifier = resolve_app_identifier("com.${company_name}.${Project_Name}", "Game", "Acme")
        assert identifier == "com.acme.game"

    def test_underscore_allowed(self):
        from xcpack.packaging.bundle_id import resolve_app_identifier

        assert resolve_app_identifier("org.studio_x.${PROJECT_NAME}", "Tower", "x") == "org.studio_x.tower"

    def test_invalid_character(self):
        from xcpack.packaging.bundle_id import resolve_app_identifier
        from xcpack.packaging.errors import InvalidIdentifier

        with pytest.raises(InvalidIdentifier) as info:
            resolve_app_identifier("com.Acme!.Game", "Game", "Acme")
        assert info.value.identifier == "com.acme!.game"
        assert "com.acme!.game" in str(info.value)

    @pytest.mark.parametrize("template", ["com.acme/game", "com.acme game", "com.äcme.game", "${PROJECT_NAME}+"])
    def test_rejects_characters_outside_allowed_set(self, template):
        from xcpack.packaging.bundle_id import resolve_app_identifier
        from xcpack.packaging.errors import InvalidIdentifier

        with pytest.raises(InvalidIdentifier):
            resolve_app_identifier(template, "Game", "Acme")

    def test_empty_identifier(self):
        from xcpack.packaging.bundle_id import resolve_app_identifier
        from xcpack.packaging.errors import InvalidIdentifier

        with pytest.raises(InvalidIdentifier) as info:
            resolve_app_identifier("${PROJECT_NAME}", " .-", "Acme")
        assert "empty" in info.value.message
