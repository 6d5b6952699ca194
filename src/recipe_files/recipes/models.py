"""
Recipe file models with Pydantic schema validation.

This module defines the in-memory shape of a recipe file (the YAML document
describing how to install a monitoring integration) and the flattened
Recipe projection consumed by the installer.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_serializer

from .errors import RecipeParseError, RecipeSerializationError
from .loader import load_recipe_document

logger = logging.getLogger(__name__)


def _scalar_to_str(v: Any) -> Any:
    """Text for scalars given directly to string fields; parsed files already carry text."""
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    if isinstance(v, (date, datetime)):
        return v.isoformat()
    return v


def _none_to_list(v: Any) -> Any:
    return [] if v is None else v


class RecipeFileModel(BaseModel):
    """Base for recipe file models: camelCase keys, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class VariableConfig(RecipeFileModel):
    """An input variable collected from the user before installing."""
    name: str = Field(default="", description="Variable name")
    prompt: str = Field(default="", description="Prompt shown when asking for the value")
    secret: bool = Field(default=False, description="Mask the value while it is typed")
    default: str = Field(default="", description="Value used when the user enters nothing")

    @field_validator('name', 'prompt', 'default', mode='before')
    @classmethod
    def coerce_to_str(cls, v):
        return _scalar_to_str(v)

    @field_validator('secret', mode='before')
    @classmethod
    def coerce_secret(cls, v):
        return False if v is None else v


class RecipeInstallTarget(RecipeFileModel):
    """Matching dimensions deciding which hosts a recipe applies to."""
    type: str = Field(default="")
    os: str = Field(default="")
    platform: str = Field(default="")
    platform_family: str = Field(default="", alias="platformFamily")
    platform_version: str = Field(default="", alias="platformVersion")
    kernel_version: str = Field(default="", alias="kernelVersion")
    kernel_arch: str = Field(default="", alias="kernelArch")

    @field_validator('*', mode='before')
    @classmethod
    def coerce_to_str(cls, v):
        return _scalar_to_str(v)


class LogMatchAttributes(RecipeFileModel):
    logtype: str = Field(default="")

    @field_validator('logtype', mode='before')
    @classmethod
    def coerce_to_str(cls, v):
        return _scalar_to_str(v)


class LogMatch(RecipeFileModel):
    """Where to find the log output of the monitored service."""
    name: str = Field(default="", description="Log source name")
    file: str = Field(default="", description="File path or glob of the log files")
    attributes: LogMatchAttributes = Field(default_factory=LogMatchAttributes)
    pattern: str = Field(default="", description="Only forward lines matching this pattern")
    systemd: str = Field(default="", description="Systemd unit to read logs from")

    @field_validator('name', 'file', 'pattern', 'systemd', mode='before')
    @classmethod
    def coerce_to_str(cls, v):
        return _scalar_to_str(v)

    @field_validator('attributes', mode='before')
    @classmethod
    def parse_attributes(cls, v):
        if v is None:
            return LogMatchAttributes()
        return v

    @model_serializer(mode='wrap')
    def omit_empty(self, handler):
        # attributes, pattern and systemd are left out of the document when unset
        data = handler(self)
        if not self.attributes.logtype:
            data.pop('attributes', None)
        if not self.pattern:
            data.pop('pattern', None)
        if not self.systemd:
            data.pop('systemd', None)
        return data


class Recipe(RecipeFileModel):
    """Flattened recipe handed to the installer.

    ``file`` holds the YAML text of the recipe file it was built from.
    """
    file: str = Field(default="", description="Serialized recipe file")
    name: str = Field(default="")
    description: str = Field(default="")
    repository: str = Field(default="")
    keywords: List[str] = Field(default_factory=list)
    process_match: List[str] = Field(default_factory=list, alias="processMatch")
    log_match: List[LogMatch] = Field(default_factory=list, alias="logMatch")
    validation_nrql: str = Field(default="", alias="validationNrql")


class RecipeFile(RecipeFileModel):
    """A recipe file as found on disk or served over HTTP.

    Instances are only built from well-formed documents; see
    :func:`parse_recipe_file`.
    """

    description: str = Field(default="", description="Human-readable description")
    input_vars: List[VariableConfig] = Field(default_factory=list, alias="inputVars")
    install: Dict[str, Any] = Field(default_factory=dict, description="Free-form install definition")
    install_targets: List[RecipeInstallTarget] = Field(default_factory=list, alias="installTargets")
    keywords: List[str] = Field(default_factory=list)
    log_match: List[LogMatch] = Field(default_factory=list, alias="logMatch")
    name: str = Field(default="", description="Recipe identifier")
    process_match: List[str] = Field(default_factory=list, alias="processMatch",
                                     description="Process name patterns the recipe applies to")
    repository: str = Field(default="", description="Source repository of the integration")
    validation_nrql: str = Field(default="", alias="validationNrql",
                                 description="Query used to validate the installation")

    @field_validator('description', 'name', 'repository', 'validation_nrql', mode='before')
    @classmethod
    def coerce_to_str(cls, v):
        return _scalar_to_str(v)

    @field_validator('keywords', 'process_match', mode='before')
    @classmethod
    def coerce_str_list(cls, v):
        """Ensure list items keep the text of their scalars."""
        if v is None:
            return []
        if isinstance(v, list):
            return [_scalar_to_str(item) for item in v]
        return v

    @field_validator('input_vars', 'install_targets', 'log_match', mode='before')
    @classmethod
    def coerce_model_list(cls, v):
        if isinstance(v, list):
            return [{} if item is None else item for item in v]
        return _none_to_list(v)

    @field_validator('install', mode='before')
    @classmethod
    def ensure_install_dict(cls, v):
        """Top-level install keys are text, whatever scalar they were given as."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {k if isinstance(k, str) else _scalar_to_str(k): value for k, value in v.items()}
        return v

    def to_yaml(self) -> str:
        """Serialize back to recipe file YAML.

        Raises:
            RecipeSerializationError: If a value cannot be represented in YAML
        """
        try:
            return yaml.safe_dump(
                self.model_dump(by_alias=True),
                sort_keys=False,
                default_flow_style=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as e:
            logger.error("Failed to serialize recipe file %s: %s", self.name, e)
            raise RecipeSerializationError(f"Failed to serialize recipe file '{self.name}': {e}") from e

    def to_recipe(self) -> Recipe:
        """Project this recipe file into a Recipe.

        Returns:
            A new Recipe carrying copies of the flattened fields and the
            re-serialized file text

        Raises:
            RecipeSerializationError: If the file cannot be re-serialized
        """
        file_str = self.to_yaml()

        return Recipe(
            file=file_str,
            name=self.name,
            description=self.description,
            repository=self.repository,
            keywords=list(self.keywords),
            process_match=list(self.process_match),
            log_match=[m.model_copy(deep=True) for m in self.log_match],
            validation_nrql=self.validation_nrql,
        )


def parse_recipe_file(content: Union[str, bytes], source: Optional[str] = None) -> RecipeFile:
    """Parse recipe file YAML into a RecipeFile.

    An empty document gives a RecipeFile with every field at its zero value.

    Args:
        content: Raw YAML text (bytes are decoded by the YAML reader)
        source: Path or URL the content came from, used in error messages

    Returns:
        Validated RecipeFile

    Raises:
        RecipeParseError: If the content is not valid YAML or does not have
            the shape of a recipe file
    """
    try:
        data = load_recipe_document(content)
    except yaml.YAMLError as e:
        raise RecipeParseError(f"Invalid recipe file YAML: {e}", source) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise RecipeParseError(
            f"Recipe file must be a mapping, got {type(data).__name__}", source
        )

    try:
        return RecipeFile.model_validate(data)
    except ValidationError as e:
        raise RecipeParseError(f"Invalid recipe file: {e}", source) from e
