import json
import sys
from typing import Any, Dict

DEFAULT_CONFIG_PATH = 'config.json'


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Файл конфигурации '{config_path}' не найден, используются значения по умолчанию.")
        return {}
    except json.JSONDecodeError:
        print(f"Ошибка: Неверный формат JSON в '{config_path}'.")
        sys.exit(1)

    if not isinstance(data, dict):
        print(f"Ошибка: '{config_path}' должен содержать JSON-объект.")
        sys.exit(1)
    return data
