"""
Story Catalog
Predefined riding stories, each paired with the title that becomes its filename
"""
import random
from typing import Optional, Sequence

from .models import StoryPair


RIDING_STORIES = (
    StoryPair(
        "Epic Mountain Trail Adventure - Kids Bike Safety",
        "Alex gears up for mountain trail adventure! Helmet on, knee pads secure. Safety first!",
    ),
    StoryPair(
        "BMX Tricks and Stunts - Safe Riding for Kids",
        "BMX tricks time! Watch our rider perform safe stunts with proper protective gear.",
    ),
    StoryPair(
        "Forest Trail Challenge - Mountain Biking Fun",
        "Forest trail challenge! Navigating rocks and roots while staying safe and having fun.",
    ),
    StoryPair(
        "Pump Track Mastery - Kids Bike Skills",
        "Pump track mastery! Using body weight to gain speed and maintain perfect balance.",
    ),
    StoryPair(
        "Dirt Jumping Adventure - Safe Stunts for Kids",
        "Dirt jumping adventure! Controlled stunts with full safety equipment and smooth landings.",
    ),
    StoryPair(
        "Urban Bike Tricks - City Riding Fun",
        "Urban bike skills! City riding with ramps, stairs, and safe trick performances.",
    ),
    StoryPair(
        "Desert Trail Adventure - Kids Mountain Biking",
        "Desert trail exploration! Sand dunes, cacti, and sunset riding with proper gear.",
    ),
    StoryPair(
        "Coastal Bike Adventure - Ocean Trail Fun",
        "Coastal bike adventure! Cliffside trails with ocean views and safety first approach.",
    ),
    StoryPair(
        "Night Riding Adventure - Kids Bike Safety",
        "Night riding safety! Headlights, reflective gear, and proper trail navigation.",
    ),
    StoryPair(
        "Mountain Summit Challenge - Kids Adventure",
        "Mountain summit challenge! Uphill climb with determination and downhill thrill ride.",
    ),
)


def pick_story(
    rng: random.Random,
    stories: Optional[Sequence[StoryPair]] = None,
) -> StoryPair:
    """Choose one story at random from the catalog"""
    stories = RIDING_STORIES if stories is None else stories
    if not stories:
        raise ValueError("story catalog is empty")
    return rng.choice(stories)
