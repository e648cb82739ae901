"""
練習コンテンツ
発音練習の単語・文と会話練習の質問を提供する
"""
import random
from typing import List

from commskills.models.schemas import ConversationQuestion, PracticeWord

PRACTICE_WORDS: List[PracticeWord] = [
    PracticeWord(word="pronunciation", difficulty="Hard", phonetic="/prəˌnʌnsiˈeɪʃən/"),
    PracticeWord(word="communication", difficulty="Medium", phonetic="/kəˌmjuːnɪˈkeɪʃən/"),
    PracticeWord(word="articulation", difficulty="Hard", phonetic="/ɑːrˌtɪkjʊˈleɪʃən/"),
    PracticeWord(word="vocabulary", difficulty="Medium", phonetic="/vəˈkæbjʊˌleri/"),
    PracticeWord(word="fluency", difficulty="Easy", phonetic="/ˈfluːənsi/"),
    PracticeWord(word="confidence", difficulty="Easy", phonetic="/ˈkɑːnfɪdəns/"),
    PracticeWord(word="presentation", difficulty="Medium", phonetic="/ˌpriːzənˈteɪʃən/"),
    PracticeWord(word="eloquent", difficulty="Hard", phonetic="/ˈeləkwənt/"),
]

PRACTICE_SENTENCES: List[str] = [
    "The quick brown fox jumps over the lazy dog.",
    "She sells seashells by the seashore.",
    "How much wood would a woodchuck chuck if a woodchuck could chuck wood?",
    "Peter Piper picked a peck of pickled peppers.",
    "Red leather, yellow leather, red leather, yellow leather.",
]

CONVERSATION_QUESTIONS: List[ConversationQuestion] = [
    ConversationQuestion(
        id=1,
        category="Interview",
        question="Tell me about yourself.",
        tips=["Keep it professional and relevant", "Structure: Present → Past → Future", "Highlight key achievements"],
    ),
    ConversationQuestion(
        id=2,
        category="Interview",
        question="What are your greatest strengths?",
        tips=["Choose strengths relevant to the role", "Provide specific examples", "Connect to business value"],
    ),
    ConversationQuestion(
        id=3,
        category="Small Talk",
        question="How was your weekend?",
        tips=["Keep it brief and positive", "Ask a follow-up question", "Find common interests"],
    ),
    ConversationQuestion(
        id=4,
        category="Group Discussion",
        question="What do you think about remote work?",
        tips=["Present both sides of the argument", "Use personal experience if relevant", "Acknowledge other viewpoints"],
    ),
    ConversationQuestion(
        id=5,
        category="Public Speaking",
        question="How do you stay motivated?",
        tips=["Start with a personal story", "Connect to a larger purpose", "End with a strong call to action"],
    ),
    ConversationQuestion(
        id=6,
        category="Small Talk",
        question="What do you do for fun?",
        tips=["Share a hobby or interest", "Keep it light and engaging", "Ask a similar question back to them"],
    ),
    ConversationQuestion(
        id=7,
        category="Group Discussion",
        question="What are the pros and cons of AI in the workplace?",
        tips=["State your opinion clearly", "Provide a specific example", "Acknowledge opposing viewpoints gracefully"],
    ),
    ConversationQuestion(
        id=8,
        category="Interview",
        question="Where do you see yourself in five years?",
        tips=["Align your goals with the company's vision", "Show ambition and a plan", "Be realistic and focused"],
    ),
]


def random_word(rng: random.Random | None = None) -> PracticeWord:
    """発音練習の単語をランダムに1つ選ぶ"""
    return (rng or random).choice(PRACTICE_WORDS)


def random_sentence(rng: random.Random | None = None) -> str:
    """発音練習の文をランダムに1つ選ぶ"""
    return (rng or random).choice(PRACTICE_SENTENCES)


def random_question(rng: random.Random | None = None) -> ConversationQuestion:
    """会話練習の質問をランダムに1つ選ぶ"""
    return (rng or random).choice(CONVERSATION_QUESTIONS)


def format_elapsed(seconds: int) -> str:
    """経過秒数を "分:秒" 形式（例: 1:05）に変換"""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"
