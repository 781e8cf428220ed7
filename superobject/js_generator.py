"""Generation of super-object script classes and the data-model registration file."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Iterable, Sequence

DATA_MODEL_FILE = "setDM.js"
ASSET_RELATION = '["existing_assets", "future_assets", "past_assets"]'

_CLASS_HEAD = Template(
    "\n"
    'import StedSuperObjectFeature from "./stedSuperObjectFeature";\n'
    "\n"
    "class StedSuperObject${external_name} extends StedSuperObjectFeature  {\n"
    "    static {\n"
    "        this.prototype.so_configs = {\n"
    "\t\t\t"
)
_RELATION = Template(
    "\n"
    '            "${feature_name}": {\n'
    '                "relation": ${relation},\n'
    "            },\n"
    "\t\t\t"
)
_CLASS_TAIL = Template(
    "\n"
    "        }\n"
    "    }\n"
    "\t${methods}\n"
    "}\n"
    "\n"
    "myw.StedSuperObject${external_name} = StedSuperObject${external_name};\n"
    "export default StedSuperObject${external_name};\n"
    "\n"
)
_DATA_MODEL = Template(
    "\n"
    'import {StedSuperObject${external_name}} from "./stedSuperObject${external_name}";\n'
    'myw.featureModels["${internal_name}"] = StedSuperObject${external_name};\n'
)


@dataclass(frozen=True)
class Relation:
    """A related feature and the relation fields, as a script array literal."""

    feature_name: str
    relation: str


@dataclass(frozen=True)
class Config:
    """Settings for one generated super-object class."""

    file_name: str
    internal_name: str
    external_name: str
    relations: tuple[Relation, ...] = ()
    methods: str = ""

    @property
    def output_name(self) -> str:
        """File name of the generated class."""
        return self.file_name % self.external_name


CONFIGS: tuple[Config, ...] = (
    Config(
        "stedSuperObject%s.js",
        "eo_connector_segment_inst",
        "Installatiegeleider",
        (Relation("eo_connector_segment", ASSET_RELATION),),
    ),
    Config(
        "stedSuperObject%s.js",
        "eo_3w_power_xfrmr_inst",
        "3wTransformator",
        (
            Relation("eo_3w_power_xfrmr", ASSET_RELATION),
            Relation("eo_3w_power_xfrmr_controller", "[]"),
        ),
    ),
    Config(
        "stedSuperObject%s.js",
        "eo_power_xfrmr_inst",
        "Transformator",
        (
            Relation("eo_power_xfrmr", ASSET_RELATION),
            Relation("eo_power_xfrmr_controller", "[]"),
        ),
    ),
    Config(
        "stedSuperObject%s.js",
        "eo_measuring_eqpt_inst",
        "Meettransformator",
        (Relation("eo_measuring_eqpt", ASSET_RELATION),),
    ),
    Config(
        "stedSuperObject%s.js",
        "eo_protective_eqpt_inst",
        "Beveiliging",
        (Relation("eo_protective_eqpt", ASSET_RELATION),),
    ),
    Config(
        "stedSuperObject%s.js",
        "eo_isolating_eqpt_inst",
        "Schakelcomponent",
        (Relation("eo_isolating_eqpt", ASSET_RELATION),),
    ),
    Config(
        "stedSuperObject%s.js",
        "eo_regulating_eqpt_inst",
        "Energieregeling",
        (Relation("eo_regulating_eqpt", ASSET_RELATION),),
    ),
)


def render_class(config: Config) -> str:
    """Return the script class for a configuration."""
    relations = "".join(
        _RELATION.substitute(feature_name=r.feature_name, relation=r.relation)
        for r in config.relations
    )
    return (
        _CLASS_HEAD.substitute(external_name=config.external_name)
        + relations
        + _CLASS_TAIL.substitute(external_name=config.external_name, methods=config.methods)
    )


def render_data_model(config: Config) -> str:
    """Return the lines that register a configuration's class as a feature model."""
    return _DATA_MODEL.substitute(
        external_name=config.external_name, internal_name=config.internal_name
    )


def generate(configs: Iterable[Config] = CONFIGS, directory: str | Path = ".") -> list[Path]:
    """Write one class file per configuration and the data-model file; return their paths."""
    configs = list(configs)
    target = Path(directory)
    written = []
    for config in configs:
        path = target / config.output_name
        path.write_text(render_class(config), encoding="utf-8")
        written.append(path)
    data_model = target / DATA_MODEL_FILE
    data_model.write_text("".join(render_data_model(c) for c in configs), encoding="utf-8")
    written.append(data_model)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the built-in super-object classes."""
    parser = argparse.ArgumentParser(
        prog="js-generator", description="Generate super-object script classes."
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="directory to write the files to"
    )
    args = parser.parse_args(argv)
    generate(CONFIGS, args.directory)
    return 0