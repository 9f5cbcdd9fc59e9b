"""
Tests for Xcode template deployment
"""
import pytest


class TestDeployTemplate:
    """测试模板部署"""

    def test_copies_tree(self, tmp_path):
        from xcpack.packaging.project_template import deploy_template

        src = tmp_path / "template"
        (src / "Game.xcodeproj").mkdir(parents=True)
        (src / "Game.xcodeproj" / "project.pbxproj").write_text("${AppName}", encoding="utf-8")
        (src / "Game").mkdir()
        (src / "Game" / "main.m").write_text("int main() {}", encoding="utf-8")

        dest = tmp_path / "out"
        deploy_template(src, dest)

        assert (dest / "Game.xcodeproj" / "project.pbxproj").read_text(encoding="utf-8") == "${AppName}"
        assert (dest / "Game" / "main.m").exists()

    def test_overwrites_and_keeps_cooked_files(self, tmp_path):
        from xcpack.packaging.project_template import deploy_template

        src = tmp_path / "template"
        (src / "Game").mkdir(parents=True)
        (src / "Game" / "main.m").write_text("new", encoding="utf-8")

        dest = tmp_path / "out"
        (dest / "Game" / "Data").mkdir(parents=True)
        (dest / "Game" / "main.m").write_text("old", encoding="utf-8")
        (dest / "Game" / "Data" / "content.dat").write_bytes(b"data")

        deploy_template(src, dest)
        assert (dest / "Game" / "main.m").read_text(encoding="utf-8") == "new"
        assert (dest / "Game" / "Data" / "content.dat").read_bytes() == b"data"

    def test_missing_template(self, tmp_path):
        from xcpack.packaging.errors import DeploymentError
        from xcpack.packaging.project_template import deploy_template

        with pytest.raises(DeploymentError) as info:
            deploy_template(tmp_path / "nope", tmp_path / "out")
        assert info.value.source == tmp_path / "nope"
        assert info.value.destination == tmp_path / "out"
        assert "nope" in str(info.value)


class TestLicenseRename:
    """测试许可文件改名"""

    def test_renames_present_files(self, tmp_path):
        from xcpack.packaging.project_template import rename_license_files

        dotnet = tmp_path / "Dotnet"
        dotnet.mkdir()
        (dotnet / "DOTNET-LICENSE.TXT").write_text("license", encoding="utf-8")
        (dotnet / "LICENSE.TXT").write_text("stale", encoding="utf-8")

        assert rename_license_files(tmp_path) == 1
        assert not (dotnet / "DOTNET-LICENSE.TXT").exists()
        assert (dotnet / "LICENSE.TXT").read_text(encoding="utf-8") == "license"

    def test_missing_files_are_not_errors(self, tmp_path):
        from xcpack.packaging.project_template import rename_license_files

        assert rename_license_files(tmp_path) == 0


class TestValidateTemplate:
    """测试模板验证"""

    def test_bundled_template(self):
        from xcpack.packaging.project_template import validate_template, RECOGNIZED_PLACEHOLDERS

        result = validate_template()
        assert result["valid"]
        assert result["errors"] == []
        assert result["warnings"] == []
        assert result["info"]["placeholders"] == len(RECOGNIZED_PLACEHOLDERS)

    def test_missing_project_file(self, tmp_path):
        from xcpack.packaging.project_template import validate_template

        result = validate_template(tmp_path)
        assert not result["valid"]
        assert "Game.xcodeproj/project.pbxproj" in result["errors"][0]

    def test_unknown_and_unused_placeholders(self, tmp_path):
        from xcpack.packaging.project_template import validate_template

        project = tmp_path / "Game.xcodeproj"
        project.mkdir()
        (project / "project.pbxproj").write_text("${AppName} ${Bogus}", encoding="utf-8")

        result = validate_template(tmp_path)
        assert not result["valid"]
        assert "Unknown placeholder: ${Bogus}" in result["errors"]
        assert "Placeholder not used: ${AppIdentifier}" in result["warnings"]
        assert "Missing game folder: Game" in result["warnings"]
