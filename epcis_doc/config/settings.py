"""Settings configuration for epcis-doc"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

GS1_EPCIS_CONTEXT = "https://ref.gs1.org/standards/epcis/epcis-context.jsonld"

Context = Union[str, Dict[str, Any], List[Union[str, Dict[str, Any]]]]


class DocumentDefaults(BaseModel):
    """Values injected into a document when the matching field is absent"""
    model_config = ConfigDict(frozen=True)

    schema_version: Optional[str] = "2.0"
    context: Optional[Context] = GS1_EPCIS_CONTEXT
    use_event_list_by_default: bool = True


class Settings(BaseSettings):
    """Application settings"""

    # Document defaults
    EPCIS_DOCUMENT_SCHEMA_VERSION: Optional[str] = "2.0"
    EPCIS_DOCUMENT_CONTEXT: Optional[Context] = GS1_EPCIS_CONTEXT
    USE_EVENT_LIST_BY_DEFAULT: bool = True

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    def document_defaults(self) -> DocumentDefaults:
        """Snapshot the document related settings as an explicit value"""
        return DocumentDefaults(
            schema_version=self.EPCIS_DOCUMENT_SCHEMA_VERSION,
            context=self.EPCIS_DOCUMENT_CONTEXT,
            use_event_list_by_default=self.USE_EVENT_LIST_BY_DEFAULT,
        )


# Create settings instance
settings = Settings()
