SUPERHERO_NAMES_PROMPT = """Suggest three names for an animal that is a superhero.

Animal: Cat
Names: Captain Sharpclaw, Agent Fluffball, The Incredible Feline
Animal: Dog
Names: Ruff the Protector, Wonder Canine, Sir Barks-a-Lot
Animal: {animal}
Names:"""


def capitalize_animal(animal: str) -> str:
    """Upper-case the first character and lower-case the rest.

    Leading whitespace is kept, so " cat" stays " cat".
    """
    return animal[:1].upper() + animal[1:].lower()


def build_prompt(animal: str) -> str:
    return SUPERHERO_NAMES_PROMPT.format(animal=capitalize_animal(animal))
