"""
PokeGuess — Вбудований демонстраційний ростер

Невеликий набір записів у форматі minimal-pokemon.json.
Використовується для демо (scripts/play.py) та як in-memory фікстура.
"""

SAMPLE_POKEMON = [
    {"id": 1, "name": "bulbasaur", "weight": 69, "height": 7, "types": ["grass", "poison"],
     "generation": 1, "color": "green", "evolves_from_species": None, "evolution_chain_id": 1},
    {"id": 2, "name": "ivysaur", "weight": 130, "height": 10, "types": ["grass", "poison"],
     "generation": 1, "color": "green", "evolves_from_species": "bulbasaur", "evolution_chain_id": 1},
    {"id": 3, "name": "venusaur", "weight": 1000, "height": 20, "types": ["grass", "poison"],
     "generation": 1, "color": "green", "evolves_from_species": "ivysaur", "evolution_chain_id": 1},
    {"id": 4, "name": "charmander", "weight": 85, "height": 6, "types": ["fire"],
     "generation": 1, "color": "red", "evolves_from_species": None, "evolution_chain_id": 2},
    {"id": 5, "name": "charmeleon", "weight": 190, "height": 11, "types": ["fire"],
     "generation": 1, "color": "red", "evolves_from_species": "charmander", "evolution_chain_id": 2},
    {"id": 6, "name": "charizard", "weight": 905, "height": 17, "types": ["fire", "flying"],
     "generation": 1, "color": "red", "evolves_from_species": "charmeleon", "evolution_chain_id": 2},
    {"id": 7, "name": "squirtle", "weight": 90, "height": 5, "types": ["water"],
     "generation": 1, "color": "blue", "evolves_from_species": None, "evolution_chain_id": 3},
    {"id": 8, "name": "wartortle", "weight": 225, "height": 10, "types": ["water"],
     "generation": 1, "color": "blue", "evolves_from_species": "squirtle", "evolution_chain_id": 3},
    {"id": 9, "name": "blastoise", "weight": 855, "height": 16, "types": ["water"],
     "generation": 1, "color": "blue", "evolves_from_species": "wartortle", "evolution_chain_id": 3},
    {"id": 25, "name": "pikachu", "weight": 60, "height": 4, "types": ["electric"],
     "generation": 1, "color": "yellow", "evolves_from_species": "pichu", "evolution_chain_id": 10},
    {"id": 26, "name": "raichu", "weight": 300, "height": 8, "types": ["electric"],
     "generation": 1, "color": "yellow", "evolves_from_species": "pikachu", "evolution_chain_id": 10},
    {"id": 39, "name": "jigglypuff", "weight": 55, "height": 5, "types": ["normal", "fairy"],
     "generation": 1, "color": "pink", "evolves_from_species": "igglybuff", "evolution_chain_id": 16},
    {"id": 54, "name": "psyduck", "weight": 196, "height": 8, "types": ["water"],
     "generation": 1, "color": "yellow", "evolves_from_species": None, "evolution_chain_id": 24},
    {"id": 94, "name": "gengar", "weight": 405, "height": 15, "types": ["ghost", "poison"],
     "generation": 1, "color": "purple", "evolves_from_species": "haunter", "evolution_chain_id": 38},
    {"id": 129, "name": "magikarp", "weight": 100, "height": 9, "types": ["water"],
     "generation": 1, "color": "red", "evolves_from_species": None, "evolution_chain_id": 64},
    {"id": 130, "name": "gyarados", "weight": 2350, "height": 65, "types": ["water", "flying"],
     "generation": 1, "color": "blue", "evolves_from_species": "magikarp", "evolution_chain_id": 64},
    {"id": 133, "name": "eevee", "weight": 65, "height": 3, "types": ["normal"],
     "generation": 1, "color": "brown", "evolves_from_species": None, "evolution_chain_id": 67},
    {"id": 143, "name": "snorlax", "weight": 4600, "height": 21, "types": ["normal"],
     "generation": 1, "color": "black", "evolves_from_species": "munchlax", "evolution_chain_id": 72},
    {"id": 144, "name": "articuno", "weight": 554, "height": 17, "types": ["ice", "flying"],
     "generation": 1, "isLegendary": True, "color": "blue", "evolves_from_species": None,
     "evolution_chain_id": 73},
    {"id": 150, "name": "mewtwo", "weight": 1220, "height": 20, "types": ["psychic"],
     "generation": 1, "isLegendary": True, "color": "purple", "evolves_from_species": None,
     "evolution_chain_id": 77},
    {"id": 151, "name": "mew", "weight": 40, "height": 4, "types": ["psychic"],
     "generation": 1, "isMythical": True, "color": "pink", "evolves_from_species": None,
     "evolution_chain_id": 78},
    {"id": 172, "name": "pichu", "weight": 20, "height": 3, "types": ["electric"],
     "generation": 2, "isBaby": True, "color": "yellow", "evolves_from_species": None,
     "evolution_chain_id": 10},
]
