import tomllib

import pytest

from harddots.commands import add
from harddots.config import HarddotsConfig
from harddots.errors import ConfigError, HarddotsError

BASE = """\
git_repo = "https://example.com/dotfiles.git"

[[applications]]
name = "zsh"
target_path = "~/.zshrc"
source_git_path = "zsh/zshrc"
packages = { macos = "zsh", debian = "zsh" }
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "harddots.toml"
    path.write_text(BASE, encoding="utf-8")
    return path


def test_add_appends_application(config_file):
    config = HarddotsConfig.load(config_file)
    add.run(
        config,
        "starship",
        "~/.config/starship.toml",
        "starship/starship.toml",
        "starship",
        None,
        "starship",
        config_path=config_file,
    )
    loaded = HarddotsConfig.load(config_file)
    assert [app.name for app in loaded.applications] == ["zsh", "starship"]
    new_app = loaded.applications[1]
    assert new_app.target_path == "~/.config/starship.toml"
    assert new_app.source_git_path == "starship/starship.toml"
    assert new_app.packages == {"macos": "starship", "alpine": "starship"}
    assert new_app.version is None
    assert new_app.custom_install is None


def test_add_preserves_existing_fields(config_file):
    config = HarddotsConfig.load(config_file)
    add.run(
        config, "git", "~/.gitconfig", "git/gitconfig", None, "git", None,
        config_path=config_file,
    )
    loaded = HarddotsConfig.load(config_file)
    assert loaded.git_repo == "https://example.com/dotfiles.git"
    assert loaded.applications[0].packages == {"macos": "zsh", "debian": "zsh"}


def test_add_without_packages_omits_table(config_file):
    config = HarddotsConfig.load(config_file)
    add.run(
        config, "vim", "~/.vimrc", "vim/vimrc", None, None, None,
        config_path=config_file,
    )
    data = tomllib.loads(config_file.read_text(encoding="utf-8"))
    entry = data["applications"][-1]
    assert entry == {
        "name": "vim",
        "target_path": "~/.vimrc",
        "source_git_path": "vim/vimrc",
    }


def test_add_duplicate_name_raises(config_file):
    before = config_file.read_text(encoding="utf-8")
    config = HarddotsConfig.load(config_file)
    with pytest.raises(HarddotsError, match="Application 'zsh' already exists"):
        add.run(
            config, "zsh", "~/.zshrc", "zsh/zshrc", None, None, None,
            config_path=config_file,
        )
    assert config_file.read_text(encoding="utf-8") == before


def test_add_creates_applications_array(tmp_path):
    path = tmp_path / "harddots.toml"
    path.write_text('git_repo = "https://example.com/d.git"\n', encoding="utf-8")
    config = HarddotsConfig(git_repo="https://example.com/d.git")
    add.run(config, "tmux", "~/.tmux.conf", "tmux/tmux.conf", None, "tmux", None, config_path=path)
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    assert data["applications"] == [
        {
            "name": "tmux",
            "target_path": "~/.tmux.conf",
            "source_git_path": "tmux/tmux.conf",
            "packages": {"debian": "tmux"},
        }
    ]


def test_add_missing_file_raises(tmp_path):
    config = HarddotsConfig(git_repo="https://example.com/d.git")
    with pytest.raises(ConfigError, match="IO error"):
        add.run(config, "a", "b", "c", config_path=tmp_path / "missing.toml")


def test_add_invalid_toml_raises(tmp_path):
    path = tmp_path / "harddots.toml"
    path.write_text("git_repo = = broken", encoding="utf-8")
    config = HarddotsConfig(git_repo="https://example.com/d.git")
    with pytest.raises(ConfigError, match="TOML parsing error"):
        add.run(config, "a", "b", "c", config_path=path)


def test_add_prints_confirmation(config_file, capsys):
    config = HarddotsConfig.load(config_file)
    add.run(
        config,
        "kitty",
        "~/.config/kitty/kitty.conf",
        "kitty/kitty.conf",
        None,
        None,
        None,
        config_path=config_file,
    )
    assert capsys.readouterr().out == "Added application 'kitty' to harddots.toml\n"