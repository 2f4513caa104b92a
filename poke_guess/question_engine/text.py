"""
PokeGuess — Тексти питань

QuestionTextGenerator перетворює (вид питання, значення) на текст
для гравця та формує пояснення, чому покемон не відповідає питанню.
Підтримує англійську та українську мови.
"""

from typing import Any, Dict, Optional

from poke_guess.schemas import AnswerType, region_name


def format_tenths(value: int) -> str:
    """Гектограми / дециметри → кг / м (69 → '6.9', 100 → '10')"""
    return f"{value / 10:g}"


class QuestionTextGenerator:
    """
    Генератор текстів питань та пояснень.

    Приклад використання:
        text_gen = QuestionTextGenerator(language="en")

        text_gen.question("weight", 69)
        # 'Is your Pokémon heavier than 6.9 kg?'

        text_gen.question("type", "fire")
        # 'Is your Pokémon a Fire type?'
    """

    SUPPORTED_LANGUAGES = ("en", "uk")

    def __init__(self, language: str = "en"):
        """
        Args:
            language: Мова текстів ("en" або "uk")
        """
        if language not in self.SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language: {language!r} "
                f"(expected one of {self.SUPPORTED_LANGUAGES})"
            )
        self.language = language

        # Шаблони питань
        self._questions: Dict[str, Dict[str, str]] = {
            "en": {
                "weight": "Is your Pokémon heavier than {value} kg?",
                "height": "Is your Pokémon taller than {value} m?",
                "type": "Is your Pokémon a {label} type?",
                "color": "Is your Pokémon mainly {value}?",
                "generation": "Is your Pokémon from generation {value} ({region})?",
                "legendary": "Is your Pokémon legendary?",
                "mythical": "Is your Pokémon mythical?",
                "baby": "Is your Pokémon a baby Pokémon?",
                "evolved_from": "Does your Pokémon evolve from another Pokémon?",
                "evolves_into": "Can your Pokémon evolve into another Pokémon?",
                "weakness": "Is your Pokémon weak against {label} moves?",
                "strength": "Is your Pokémon strong against {label} Pokémon?",
            },
            "uk": {
                "weight": "Ваш покемон важчий за {value} кг?",
                "height": "Ваш покемон вищий за {value} м?",
                "type": "Ваш покемон типу {label}?",
                "color": "Ваш покемон переважно кольору {value}?",
                "generation": "Ваш покемон з покоління {value} ({region})?",
                "legendary": "Ваш покемон легендарний?",
                "mythical": "Ваш покемон міфічний?",
                "baby": "Ваш покемон є малюком?",
                "evolved_from": "Ваш покемон еволюціонує з іншого покемона?",
                "evolves_into": "Чи може ваш покемон еволюціонувати в іншого покемона?",
                "weakness": "Ваш покемон вразливий до атак типу {label}?",
                "strength": "Ваш покемон сильний проти покемонів типу {label}?",
            },
        }

        # Пояснення невідповідності: (вид, відповідь гравця) → шаблон
        self._reasons: Dict[str, Dict[str, Dict[str, str]]] = {
            "en": {
                "weight": {
                    "yes": "{name} weighs {actual} kg, which is not more than {value} kg",
                    "no": "{name} weighs {actual} kg, which is more than {value} kg",
                },
                "height": {
                    "yes": "{name} is {actual} m tall, which is not more than {value} m",
                    "no": "{name} is {actual} m tall, which is more than {value} m",
                },
                "type": {
                    "yes": "{name} is not a {label} type (types: {actual})",
                    "no": "{name} is a {label} type",
                },
                "color": {
                    "yes": "{name} is {actual}, not {value}",
                    "no": "{name} is {value}",
                },
                "generation": {
                    "yes": "{name} is from generation {actual}, not {value}",
                    "no": "{name} is from generation {value} ({region})",
                },
                "legendary": {
                    "yes": "{name} is not legendary",
                    "no": "{name} is legendary",
                },
                "mythical": {
                    "yes": "{name} is not mythical",
                    "no": "{name} is mythical",
                },
                "baby": {
                    "yes": "{name} is not a baby Pokémon",
                    "no": "{name} is a baby Pokémon",
                },
                "evolved_from": {
                    "yes": "{name} does not evolve from another Pokémon",
                    "no": "{name} evolves from {actual}",
                },
                "evolves_into": {
                    "yes": "{name} does not evolve any further",
                    "no": "{name} can evolve into another Pokémon",
                },
                "weakness": {
                    "yes": "{name} is not weak against {label} (weaknesses: {actual})",
                    "no": "{name} is weak against {label}",
                },
                "strength": {
                    "yes": "{name} is not strong against {label} (strengths: {actual})",
                    "no": "{name} is strong against {label}",
                },
            },
            "uk": {
                "weight": {
                    "yes": "{name} важить {actual} кг, тобто не більше {value} кг",
                    "no": "{name} важить {actual} кг, тобто більше {value} кг",
                },
                "height": {
                    "yes": "Зріст {name} {actual} м, тобто не більше {value} м",
                    "no": "Зріст {name} {actual} м, тобто більше {value} м",
                },
                "type": {
                    "yes": "{name} не типу {label} (типи: {actual})",
                    "no": "{name} типу {label}",
                },
                "color": {
                    "yes": "{name} кольору {actual}, а не {value}",
                    "no": "{name} кольору {value}",
                },
                "generation": {
                    "yes": "{name} з покоління {actual}, а не {value}",
                    "no": "{name} з покоління {value} ({region})",
                },
                "legendary": {
                    "yes": "{name} не легендарний",
                    "no": "{name} легендарний",
                },
                "mythical": {
                    "yes": "{name} не міфічний",
                    "no": "{name} міфічний",
                },
                "baby": {
                    "yes": "{name} не є малюком",
                    "no": "{name} є малюком",
                },
                "evolved_from": {
                    "yes": "{name} не еволюціонує з іншого покемона",
                    "no": "{name} еволюціонує з {actual}",
                },
                "evolves_into": {
                    "yes": "{name} не має наступних форм",
                    "no": "{name} може еволюціонувати далі",
                },
                "weakness": {
                    "yes": "{name} не вразливий до {label} (слабкості: {actual})",
                    "no": "{name} вразливий до {label}",
                },
                "strength": {
                    "yes": "{name} не сильний проти {label} (сильні сторони: {actual})",
                    "no": "{name} сильний проти {label}",
                },
            },
        }

    def _fields(self, kind: str, value: Any) -> Dict[str, Any]:
        fields: Dict[str, Any] = {"value": value, "label": ""}

        if kind in ("weight", "height") and value is not None:
            fields["value"] = format_tenths(int(value))
        elif kind == "generation" and value is not None:
            fields["region"] = region_name(int(value))
        elif isinstance(value, str):
            fields["label"] = value.replace("-", " ").capitalize()

        return fields

    def question(self, kind: str, value: Any = None) -> str:
        """
        Текст питання.

        Args:
            kind: Вид питання (назва стратегії або підвид еволюції)
            value: Поріг / категорія (для прапорців не потрібне)

        Returns:
            Текст питання поточною мовою
        """
        template = self._questions[self.language][kind]
        return template.format(**self._fields(kind, value))

    def reason(
        self,
        kind: str,
        answer: AnswerType,
        name: str,
        value: Any = None,
        actual: Optional[Any] = None
    ) -> str:
        """
        Пояснення, чому покемон не відповідає відповіді гравця.

        Args:
            kind: Вид питання
            answer: Відповідь гравця (yes / no)
            name: Назва покемона для відображення
            value: Значення з питання
            actual: Фактичне значення покемона (вже відформатоване)
        """
        template = self._reasons[self.language][kind][answer.value]
        fields = self._fields(kind, value)
        fields.update(name=name, actual=actual)
        return template.format(**fields)
