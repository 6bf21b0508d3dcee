"""
Pydantic configuration schema for walkpwd.
"""

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Generator Configuration
# =============================================================================


class GeneratorConfig(BaseModel):
    """Defaults for generated passwords."""

    default_length: int = Field(default=12, ge=1)
    use_symbols: bool = False


# =============================================================================
# Clipboard Configuration
# =============================================================================


class ClipboardConfig(BaseModel):
    """Clipboard delivery settings."""

    # Seconds to sleep after piping text into a helper process
    settle_delay: float = Field(default=0.1, ge=0.0)
    # Wait for the helper and treat a non-zero exit as a failure
    wait_for_exit: bool = False
    exit_timeout: float = Field(default=2.0, gt=0.0)
    # Fall back to pyperclip when no helper process works
    library_fallback: bool = True


# =============================================================================
# Root Configuration Model
# =============================================================================


class Config(BaseModel):
    """
    Root configuration model for walkpwd.

    Loaded from config.yaml in the walkpwd home directory, with
    WALKPWD_<SECTION>_<KEY> environment overrides.
    """

    model_config = ConfigDict(extra="ignore")

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    clipboard: ClipboardConfig = Field(default_factory=ClipboardConfig)
