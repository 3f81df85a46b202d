from pydantic import BaseModel, ConfigDict, Field


class IconsSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tool: str = Field(default="svgexport", min_length=1)
    icon_dir: str = "src-tauri/icons"
    source: str = Field(default="icon.svg", min_length=1)


class StyleSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    output_dir: str = "."
    filename: str = Field(default="tailwind.config.js", min_length=1)


class AssetsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    icons: IconsSettings = Field(default_factory=IconsSettings)
    style: StyleSettings = Field(default_factory=StyleSettings)
