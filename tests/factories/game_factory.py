"""
Game State Factory

Provides factories for game-related test data: prompts and scores.
"""

import random
from typing import List
from dataclasses import dataclass, field

from factory_kit import Factory


SAMPLE_PROMPTS = [
    ("What's your favorite way to spend a weekend?", 'lifestyle'),
    ("If you could travel anywhere in the world, where would you go?", 'travel'),
    ("What's the most unusual food you've ever eaten?", 'food'),
    ("Describe your ideal job in three words.", 'career'),
]

SAMPLE_RESPONSES = [
    "I'd love to explore new hiking trails and enjoy nature.",
    "Reading a good book by the fireplace sounds perfect.",
    "Visiting local farmers markets and trying new recipes.",
    "Learning a new hobby like photography or painting.",
]


@dataclass
class PromptData:
    """Test data structure for prompt information"""
    id: str
    prompt: str
    category: str = 'general'
    responses: List[str] = field(default_factory=list)


@dataclass
class ScoreData:
    """Test data structure for score information"""
    player_name: str
    round_score: int
    total_score: int
    correct_guesses: int = 0
    bonus_points: int = 0


def prompt_factory() -> Factory[PromptData]:
    """Prompts with sequential IDs, a sampled question and sampled AI responses"""
    def sample(opts):
        return SAMPLE_PROMPTS[opts['sample_index'] % len(SAMPLE_PROMPTS)]

    return (Factory(lambda attrs: PromptData(**attrs), name='PromptFactory')
            .option('sample_index', lambda: random.randrange(len(SAMPLE_PROMPTS)))
            .option('response_count', 2)
            .sequence('id', lambda n: f"prompt_{n:03d}")
            .attr('prompt', lambda opts: sample(opts)[0])
            .attr('category', lambda opts: sample(opts)[1])
            .attr('responses', lambda opts: SAMPLE_RESPONSES[:opts['response_count']]))


def score_factory() -> Factory[ScoreData]:
    """Scores derived from whether the player guessed correctly"""
    def apply_bonus(score: ScoreData, options) -> None:
        score.round_score += score.bonus_points
        score.total_score += score.round_score

    return (Factory(lambda attrs: ScoreData(**attrs), name='ScoreFactory')
            .option('correct', True)
            .option('bonus', 0)
            .sequence('player_name', lambda n: f"Player{n}")
            .attr('round_score', lambda opts: 10 if opts['correct'] else 0)
            .attr('correct_guesses', lambda opts: 1 if opts['correct'] else 0)
            .attr('bonus_points', lambda opts: opts['bonus'] if opts['correct'] else 0)
            .attr('total_score', 0)
            .after(apply_bonus))
