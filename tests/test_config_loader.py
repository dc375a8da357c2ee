import pytest

from rdrop.config_loader import ConfigLoader
from rdrop.constants import CONFIG_FILE
from rdrop.models import Anchor, ConfigError


@pytest.fixture
def loader(test_logger):
    return ConfigLoader(test_logger)


@pytest.mark.asyncio
async def test_load_section(tmp_path, loader):
    path = tmp_path / "config.toml"
    path.write_text(
        """
[rdrop]
terminal = "kitty"
class = "kitty-dropterm"
width = 50
height = 30
margin = 20
anchor = "top"
"""
    )

    conf = await loader.load(path)

    assert conf.class_name == "kitty-dropterm"
    assert (conf.width, conf.height, conf.margin, conf.anchor) == (50, 30, 20, Anchor.TOP)


@pytest.mark.asyncio
async def test_load_flat_file(tmp_path, loader):
    path = tmp_path / "rdrop.toml"
    path.write_text('terminal = "alacritty"\nclass = "dropdown"\nwidth = 30\nheight = 50\ngap = 20\nposition = "R"\n')

    conf = await loader.load(str(path))

    assert conf.terminal == "alacritty"
    assert (conf.margin, conf.anchor) == (20, Anchor.RIGHT)


@pytest.mark.asyncio
async def test_expands_variables(tmp_path, loader, monkeypatch):
    monkeypatch.setenv("RDROP_TEST_DIR", str(tmp_path))
    (tmp_path / "config.toml").write_text('[rdrop]\nterminal = "kitty"\nclass = "x"\n')

    conf = await loader.load("$RDROP_TEST_DIR/config.toml")

    assert conf.class_name == "x"


@pytest.mark.asyncio
async def test_missing_file(tmp_path, loader):
    with pytest.raises(ConfigError, match="config file not found"):
        await loader.load(tmp_path / "nope.toml")


@pytest.mark.asyncio
async def test_directory_is_not_a_file(tmp_path, loader):
    with pytest.raises(ConfigError, match="config file not found"):
        await loader.load(tmp_path)


@pytest.mark.asyncio
async def test_syntax_error(tmp_path, loader):
    path = tmp_path / "config.toml"
    path.write_text('[rdrop]\nterminal = "kitty\n')

    with pytest.raises(ConfigError, match="invalid TOML"):
        await loader.load(path)


@pytest.mark.asyncio
async def test_section_not_a_table(tmp_path, loader):
    path = tmp_path / "config.toml"
    path.write_text('rdrop = "kitty"\n')

    with pytest.raises(ConfigError, match=r"\[rdrop\] must be a table"):
        await loader.load(path)


@pytest.mark.asyncio
async def test_invalid_content(tmp_path, loader):
    path = tmp_path / "config.toml"
    path.write_text('[rdrop]\nterminal = "kitty"\nclass = "x"\nwidth = 150\n')

    with pytest.raises(ConfigError, match="150 is out of range"):
        await loader.load(path)


def test_default_path():
    assert ConfigLoader.resolve_path() == CONFIG_FILE
    assert ConfigLoader.resolve_path("") == CONFIG_FILE
    assert CONFIG_FILE.parts[-2:] == ("rdrop", "config.toml")
