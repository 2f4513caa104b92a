"""
Тести для модуля config

Запуск: pytest tests/test_config.py -v
Або демо: python tests/test_config.py
"""

import tempfile
from pathlib import Path


def test_default_config():
    """Тест конфігурації за замовчуванням"""
    from poke_guess.config import get_default_config

    config = get_default_config()

    assert config.project_name == "PokeGuess"
    assert config.question_engine.max_questions == 20
    assert config.question_engine.max_selection_attempts == 10
    assert config.question_engine.small_population_size == 3
    assert config.question_engine.language == "en"
    assert config.data.minimal_file == "minimal-pokemon.json"
    assert config.verbose is False

    print(f"✓ Default config: v{config.version}, budget={config.question_engine.max_questions}")


def test_from_dict():
    """Тест створення конфігурації зі словника"""
    from poke_guess.config import PokeGuessConfig

    config = PokeGuessConfig.from_dict({
        "verbose": True,
        "question_engine": {"max_questions": 15, "language": "uk"},
        "data": {"data_dir": "custom/data"},
    })

    assert config.verbose is True
    assert config.question_engine.max_questions == 15
    assert config.question_engine.language == "uk"
    assert config.question_engine.max_selection_attempts == 10
    assert config.data.data_dir == "custom/data"
    assert config.data.types_file == "all-types.json"

    print(f"✓ from_dict: budget={config.question_engine.max_questions}, lang={config.question_engine.language}")


def test_from_empty_dict():
    """Тест порожнього словника"""
    from poke_guess.config import PokeGuessConfig, get_default_config

    assert PokeGuessConfig.from_dict({}) == get_default_config()
    assert PokeGuessConfig.from_dict(None) == get_default_config()

    print("✓ Empty dict → default config")


def test_yaml_roundtrip():
    """Тест збереження та завантаження YAML"""
    from poke_guess.config import PokeGuessConfig, save_config, load_config, load_yaml

    config = PokeGuessConfig()
    config.question_engine.max_questions = 12
    config.data.data_dir = "somewhere/else"

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "nested" / "config.yaml"
        save_config(config, str(path))

        assert path.exists()
        raw = load_yaml(str(path))
        assert raw["question_engine"]["max_questions"] == 12

        loaded = load_config(str(path))

    assert loaded == config

    print(f"✓ YAML roundtrip: {loaded.question_engine.max_questions} questions, data={loaded.data.data_dir}")


def test_empty_yaml():
    """Тест порожнього YAML файлу"""
    from poke_guess.config import load_config, get_default_config

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "empty.yaml"
        path.write_text("", encoding="utf-8")

        config = load_config(str(path))

    assert config == get_default_config()

    print("✓ Empty YAML → default config")


def test_api_config_from_env():
    """Тест APIConfig.from_env"""
    import os
    from poke_guess.api.config import APIConfig

    keys = ["API_PORT", "MAX_SESSIONS", "DEFAULT_LANGUAGE", "DATA_DIR"]
    saved = {k: os.environ.get(k) for k in keys}

    try:
        os.environ["API_PORT"] = "9001"
        os.environ["MAX_SESSIONS"] = "5"
        os.environ["DEFAULT_LANGUAGE"] = "uk"
        os.environ["DATA_DIR"] = "some/data"

        api_config = APIConfig.from_env()
    finally:
        for key, value in saved.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value

    assert api_config.port == 9001
    assert api_config.max_sessions == 5
    assert api_config.default_language == "uk"
    assert api_config.data_dir == "some/data"
    assert api_config.router_prefix == "/api/v1"

    print(f"✓ APIConfig.from_env: port={api_config.port}, sessions={api_config.max_sessions}")


def demo():
    print("=" * 50)
    print("PokeGuess — Тест конфігурації")
    print("=" * 50)

    from poke_guess.config import get_default_config

    config = get_default_config()

    print(f"Версія: {config.version}")
    print(f"Бюджет питань: {config.question_engine.max_questions}")
    print(f"Спроб вибору: {config.question_engine.max_selection_attempts}")
    print(f"Мова: {config.question_engine.language}")
    print(f"Дані: {config.data.data_dir}")

    print("=" * 50)
    print("✅ Успішно!")


if __name__ == "__main__":
    demo()
