from pathlib import Path
from tempfile import TemporaryDirectory

from flexconf import ConfigFiles, DataclassConfig, configclass, load_from_arguments


@configclass
class AppConfig(DataclassConfig):
    name: str = "demo"
    verbose: bool = False
    output_dir: Path = Path("out")


def main() -> None:
    files = ConfigFiles()
    with TemporaryDirectory() as tmp:
        for suffix in (".yml", ".json", ".toml", ""):
            path = Path(tmp) / f"config{suffix}"
            files.save_to_file(AppConfig(name="prod", verbose=True), path)
            config = files.load_from_file(AppConfig, path)
            assert config == AppConfig(name="prod", verbose=True)

    config = load_from_arguments(AppConfig, ["--verbose"])
    assert config.verbose
    assert config.output_dir == Path("out")


if __name__ == "__main__":
    main()
