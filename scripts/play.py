#!/usr/bin/env python3
"""
PokeGuess — Гра в консолі

Запуск:
    python scripts/play.py
    python scripts/play.py --language uk
    python scripts/play.py --data-dir data/aggregated --verbose
    python scripts/play.py --config configs/game.yaml
"""

import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from poke_guess.config import get_default_config, load_config
from poke_guess.dataset import AggregatedDataProvider, DataUnavailableError, SampleDataProvider
from poke_guess.game_engine import GameEngine
from poke_guess.schemas import AnswerType


PROMPTS = {
    "en": {
        "answer": "  (yes / no / unknown) > ",
        "invalid": "  ⚠ Please answer yes, no or unknown",
        "guess": "🎯 Your Pokémon is {name}!",
        "no_guess": "🤷 I could not figure out your Pokémon.",
        "correct": "Did I guess right? (yes / no) > ",
        "which": "Which Pokémon were you thinking of? > ",
        "not_found": "I don't know a Pokémon called '{name}'.",
        "no_reason": "No question ruled out {name}.",
        "again": "Play again? (yes / no) > ",
    },
    "uk": {
        "answer": "  (так / ні / не знаю) > ",
        "invalid": "  ⚠ Відповідайте так, ні або не знаю",
        "guess": "🎯 Ваш покемон: {name}!",
        "no_guess": "🤷 Не вдалося вгадати вашого покемона.",
        "correct": "Я вгадав? (так / ні) > ",
        "which": "Якого покемона ви загадали? > ",
        "not_found": "Покемона '{name}' не знайдено.",
        "no_reason": "Жодне питання не виключило {name}.",
        "again": "Зіграти ще? (так / ні) > ",
    },
}


def ask_yes_no(prompt: str) -> bool:
    while True:
        try:
            return AnswerType.parse(input(prompt)) is AnswerType.YES
        except ValueError:
            continue


def play_round(engine: GameEngine, texts: dict) -> None:
    snapshot = engine.start_new_game()

    while not snapshot.is_complete:
        number = snapshot.questions_asked + 1
        print(f"\n❓ [{number}] {snapshot.current_question.text}")
        print(f"   ({snapshot.remaining_count} candidates)")

        try:
            engine.answer_question(input(texts["answer"]))
        except ValueError:
            print(texts["invalid"])
            continue

        snapshot = engine.get_game_state()

    print()
    if snapshot.guessed_entity is None:
        print(texts["no_guess"])
    else:
        print(texts["guess"].format(name=snapshot.guessed_entity.display_name))
        if ask_yes_no(texts["correct"]):
            return

    name = input(texts["which"])
    explanation = engine.explain_elimination(name)

    if not explanation.found:
        print(texts["not_found"].format(name=name.strip()))
    elif not explanation.eliminated_by:
        print(texts["no_reason"].format(name=explanation.matched_entity.display_name))
    else:
        for reason in explanation.eliminated_by:
            print(f"  ❌ {reason.question_text} → {reason.response.value}: {reason.reason}")


def main():
    parser = argparse.ArgumentParser(description='PokeGuess console game')
    parser.add_argument('--data-dir', default=None, help='Aggregated data directory (default: built-in roster)')
    parser.add_argument('--config', default=None, help='YAML config file')
    parser.add_argument('--language', choices=['en', 'uk'], default=None, help='Question language')
    parser.add_argument('--verbose', action='store_true', help='Print question selection details')

    args = parser.parse_args()

    config = load_config(args.config) if args.config else get_default_config()
    if args.language:
        config.question_engine.language = args.language
    if args.verbose:
        config.verbose = True

    if args.data_dir:
        provider = AggregatedDataProvider(args.data_dir, config.data, verbose=config.verbose)
    else:
        provider = SampleDataProvider(verbose=config.verbose)

    engine = GameEngine(provider, config=config)
    texts = PROMPTS[config.question_engine.language]

    print("=" * 60)
    print(f"🎮 {config.project_name} v{config.version}")
    print("=" * 60)

    try:
        engine.initialize()
    except DataUnavailableError as e:
        print(f"❌ {e}")
        sys.exit(1)

    while True:
        play_round(engine, texts)
        if not ask_yes_no(texts["again"]):
            break


if __name__ == "__main__":
    main()
