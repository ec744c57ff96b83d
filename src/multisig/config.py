"""MultiSigConfig — конфигурация кошелька (owners + quorum).

Загружается из dict / JSON файла. Сначала документ проверяется против
JSON Schema multisig_config.json (форма и типы), затем GUARD 0
(непустые, уникальные, ненулевые owners; 1 ≤ quorum ≤ owner_count).
Любое нарушение — InvalidConfiguration.
"""

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from src.core.contracts import MultiSigConfigValidator
from src.core.domain.identifiers import normalize_identifier
from src.multisig.errors import InvalidConfiguration
from src.multisig.guards import Guard00Configuration, raise_if_blocked


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MultiSigConfig:
    """Конфигурация multisig кошелька.

    owners: владельцы в порядке реестра (нормализованные идентификаторы)
    quorum: минимальное число различных подтверждений для execute
    """

    owners: Tuple[str, ...]
    quorum: int

    def __post_init__(self):
        raise_if_blocked(Guard00Configuration().evaluate(self.owners, self.quorum))
        object.__setattr__(self, "owners", tuple(normalize_identifier(o) for o in self.owners))

    @property
    def owner_count(self) -> int:
        return len(self.owners)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MultiSigConfig":
        """
        Создание конфигурации из JSON-документа.

        Raises:
            InvalidConfiguration: документ не соответствует схеме или GUARD 0
        """
        validator = MultiSigConfigValidator()
        errors = validator.error_messages(data)
        if errors:
            logger.warning("multisig config rejected by schema: %s", "; ".join(errors))
            raise InvalidConfiguration("; ".join(errors))
        return cls(owners=tuple(data["owners"]), quorum=data["quorum"])

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "MultiSigConfig":
        """Загрузка конфигурации из JSON файла."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidConfiguration(f"{path}: invalid JSON: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {"owners": list(self.owners), "quorum": self.quorum}
