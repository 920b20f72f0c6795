import pytest

from app.agent.prompts.superhero import build_prompt, capitalize_animal

CAT_EXAMPLE = "Animal: Cat\nNames: Captain Sharpclaw, Agent Fluffball, The Incredible Feline"
DOG_EXAMPLE = "Animal: Dog\nNames: Ruff the Protector, Wonder Canine, Sir Barks-a-Lot"


@pytest.mark.parametrize(
    ("animal", "expected"),
    [("cat", "Cat"), ("CAT", "Cat"), ("c", "C"), ("hORSE fly", "Horse fly")],
)
def test_capitalize_animal(animal, expected):
    assert capitalize_animal(animal) == expected


def test_capitalize_animal_keeps_leading_whitespace():
    assert capitalize_animal("  cat") == "  cat"


def test_build_prompt_contains_examples_and_ends_with_names():
    prompt = build_prompt("owl")

    assert prompt.startswith("Suggest three names for an animal that is a superhero.\n\n")
    assert CAT_EXAMPLE in prompt
    assert DOG_EXAMPLE in prompt
    assert prompt.endswith("\nAnimal: Owl\nNames:")


def test_build_prompt_uses_capitalized_animal():
    assert "Animal: Cat\nNames:" in build_prompt("CAT")
    assert build_prompt("c").endswith("Animal: C\nNames:")
