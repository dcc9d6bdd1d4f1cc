"""Fixed trivia catalog."""

from typing import Dict, List, Tuple

from unoquiz.engine.card import Question

SCIENCE = "Science"
GEOGRAPHY = "Geography"
HISTORY = "History"
POP_CULTURE = "Pop Culture"
MATH = "Math"
NATURE = "Nature"


def _q(text: str, options: Tuple[str, str, str, str], correct: int, category: str) -> Question:
    return Question(text=text, options=options, correct=correct, category=category)


QUESTIONS: Tuple[Question, ...] = (
    _q("What is the most abundant chemical element in the universe?",
       ("Oxygen", "Hydrogen", "Carbon", "Nitrogen"), 1, SCIENCE),
    _q("How many planets are in the Solar System?", ("7", "8", "9", "10"), 1, SCIENCE),
    _q("Which gas do plants absorb during photosynthesis?",
       ("Oxygen", "Nitrogen", "Carbon dioxide", "Hydrogen"), 2, SCIENCE),
    _q("How many bones are in the adult human body?", ("206", "208", "210", "204"), 0, SCIENCE),
    _q("What is the speed of light in a vacuum?",
       ("300,000 km/s", "150,000 km/s", "450,000 km/s", "250,000 km/s"), 0, SCIENCE),
    _q("Which planet is known as the Red Planet?", ("Venus", "Jupiter", "Mars", "Saturn"), 2, SCIENCE),
    _q("What is the largest organ of the human body?", ("Liver", "Lung", "Skin", "Intestine"), 2, SCIENCE),
    _q("What is the chemical symbol for gold?", ("Go", "Gd", "Au", "Ag"), 2, SCIENCE),
    _q("In which part of the cell is DNA found?",
       ("Membrane", "Nucleus", "Ribosome", "Mitochondria"), 1, SCIENCE),
    _q("What is the hottest planet in the Solar System?",
       ("Mercury", "Venus", "Mars", "Jupiter"), 1, SCIENCE),

    _q("What is the capital of Brazil?",
       ("Sao Paulo", "Rio de Janeiro", "Brasilia", "Salvador"), 2, GEOGRAPHY),
    _q("What is the largest country in the world by area?",
       ("China", "Canada", "Brazil", "Russia"), 3, GEOGRAPHY),
    _q("What is the largest ocean in the world?", ("Atlantic", "Indian", "Arctic", "Pacific"), 3, GEOGRAPHY),
    _q("What is the longest river in the world?",
       ("Amazon", "Nile", "Yangtze", "Mississippi"), 1, GEOGRAPHY),
    _q("What is the highest mountain in the world?",
       ("K2", "Everest", "Aconcagua", "Kilimanjaro"), 1, GEOGRAPHY),
    _q("On which continent is Egypt?", ("Asia", "Europe", "Africa", "Oceania"), 2, GEOGRAPHY),
    _q("Which country has the largest population?", ("India", "China", "USA", "Brazil"), 0, GEOGRAPHY),
    _q("What is the capital of Argentina?",
       ("Cordoba", "Rosario", "Buenos Aires", "Mendoza"), 2, GEOGRAPHY),
    _q("What is the smallest country in the world?",
       ("Monaco", "San Marino", "Vatican City", "Liechtenstein"), 2, GEOGRAPHY),
    _q("What is the hottest desert in the world?", ("Gobi", "Atacama", "Sahara", "Namib"), 2, GEOGRAPHY),

    _q("In what year did Brazil declare independence?", ("1808", "1822", "1889", "1500"), 1, HISTORY),
    _q("Who led the first Portuguese fleet to reach Brazil?",
       ("Christopher Columbus", "Pedro Alvares Cabral", "Vasco da Gama", "Ferdinand Magellan"), 1, HISTORY),
    _q("When was the Second World War fought?",
       ("1914-1918", "1939-1945", "1935-1942", "1941-1947"), 1, HISTORY),
    _q("Who was the first president of Brazil?",
       ("Pedro II", "Getulio Vargas", "Deodoro da Fonseca", "Floriano Peixoto"), 2, HISTORY),
    _q("In what year did humans first land on the Moon?", ("1967", "1968", "1969", "1970"), 2, HISTORY),
    _q("Which pharaoh built the Great Pyramid of Giza?",
       ("Tutankhamun", "Cleopatra", "Khufu", "Ramesses II"), 2, HISTORY),
    _q("When did the French Revolution begin?", ("1776", "1789", "1799", "1804"), 1, HISTORY),
    _q("In which country did the Industrial Revolution start?",
       ("France", "Germany", "USA", "England"), 3, HISTORY),

    _q('Who says "May the Force be with you"?',
       ("Han Solo", "Luke Skywalker", "Obi-Wan Kenobi", "All the Jedi"), 3, POP_CULTURE),
    _q('Which band recorded "Bohemian Rhapsody"?',
       ("The Beatles", "Led Zeppelin", "Queen", "Rolling Stones"), 2, POP_CULTURE),
    _q("In which city is the Eiffel Tower?", ("Lyon", "Marseille", "Paris", "Bordeaux"), 2, POP_CULTURE),
    _q("Who is the title character of the Harry Potter books?",
       ("Hermione Granger", "Harry Potter", "Ron Weasley", "Draco Malfoy"), 1, POP_CULTURE),
    _q("Who painted the Mona Lisa?",
       ("Michelangelo", "Raphael", "Leonardo da Vinci", "Caravaggio"), 2, POP_CULTURE),
    _q("What is the most popular sport in Brazil?",
       ("Volleyball", "Basketball", "Football", "Swimming"), 2, POP_CULTURE),
    _q("How many colors are in a rainbow?", ("5", "6", "7", "8"), 2, POP_CULTURE),
    _q("What is the currency of Brazil?", ("Peso", "Dollar", "Euro", "Real"), 3, POP_CULTURE),

    _q("What is 7 x 8?", ("54", "56", "58", "63"), 1, MATH),
    _q("What is the square root of 144?", ("11", "12", "13", "14"), 1, MATH),
    _q("What is 25% of 200?", ("40", "45", "50", "55"), 2, MATH),
    _q("What is pi rounded to two decimals?", ("3.14", "3.16", "3.12", "3.18"), 0, MATH),
    _q("What is 2 to the power of 10?", ("512", "1024", "2048", "256"), 1, MATH),
    _q("How many sides does a hexagon have?", ("5", "6", "7", "8"), 1, MATH),
    _q("What is the next prime number after 11?", ("12", "13", "14", "15"), 1, MATH),
    _q("What is 15% of 300?", ("40", "42", "45", "50"), 2, MATH),

    _q("What is the fastest land animal?", ("Cheetah", "Pronghorn", "Lion", "Greyhound"), 0, NATURE),
    _q("What is the largest animal in the world?",
       ("African elephant", "Whale shark", "Blue whale", "Giraffe"), 2, NATURE),
    _q("How many legs does a spider have?", ("6", "7", "8", "10"), 2, NATURE),
    _q("Which is the only mammal capable of true flight?",
       ("Platypus", "Bat", "Flying squirrel", "Flying fish"), 1, NATURE),
    _q("Which tree produces acorns?", ("Pine", "Oak", "Maple", "Chestnut"), 1, NATURE),
)


def all_questions() -> Tuple[Question, ...]:
    """Return the full read-only catalog."""
    return QUESTIONS


def categories() -> List[str]:
    """Distinct categories in catalog order."""
    seen: List[str] = []
    for question in QUESTIONS:
        if question.category not in seen:
            seen.append(question.category)
    return seen


def questions_by_category() -> Dict[str, List[Question]]:
    grouped: Dict[str, List[Question]] = {name: [] for name in categories()}
    for question in QUESTIONS:
        grouped[question.category].append(question)
    return grouped
