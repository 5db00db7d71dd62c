"""Key/value settings service."""

from sqlalchemy.orm import Session

from receptradar.models.setting import Setting

LLM_INCLUDE_IMAGE_KEY = "llm_include_image"


class SettingsService:
    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> str | None:
        setting = self.db.get(Setting, key)
        return setting.value if setting else None

    def set(self, key: str, value: str | None) -> None:
        setting = self.db.get(Setting, key)
        if setting:
            setting.value = value
        else:
            self.db.add(Setting(key=key, value=value))
        self.db.commit()

    def include_image(self) -> bool:
        """Images are on unless explicitly switched off."""
        return self.get(LLM_INCLUDE_IMAGE_KEY) != "false"
