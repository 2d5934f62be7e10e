"""Default Card Data — the built-in catalog used when no catalog file is configured."""

from spinwheel.core.catalog import Catalog, Modifier, Prompt, Rule, RuleGroup
from spinwheel.core.domain_types import ModifierType, RuleSpecial


def _group(
    group_id: int, name: str, primary: tuple[str, str], flipped: tuple[str, str],
    special: RuleSpecial | None = None,
) -> RuleGroup:
    return RuleGroup(
        id=group_id,
        name=name,
        primary_rule=Rule(group_id * 100 + 1, primary[0], primary[1], special),
        flipped_rule=Rule(group_id * 100 + 2, flipped[0], flipped[1], special),
    )


RULE_GROUPS: tuple[RuleGroup, ...] = (
    _group(1, "Voice",
           ("In a sing-song voice", "You must speak in a sing-song voice, lilting up and down."),
           ("Speak in a monotone voice", "You must speak in a monotone voice, with no inflection.")),
    _group(2, "Speech",
           ("No filler words", "You cannot use filler words (um, uh, like)."),
           ("Only use filler words", "You must use filler words in every sentence.")),
    _group(3, "Language",
           ("No cursing", "You are not allowed to curse or use swear words."),
           ("Must curse", "You must include a curse word in every sentence.")),
    _group(4, "Impression",
           ("Do a movie-star impression", "You must speak like a classic movie star."),
           ("Do a terrible impression", "You must do the worst celebrity impression you can manage.")),
    _group(5, "Manner",
           ("Speak very politely", "You must say everything very politely."),
           ("Speak very rudely", "You must say everything very rudely.")),
    _group(6, "Sentence Structure",
           ("Questions Only", "You can only speak in questions."),
           ("Statements Only", "You can only speak in statements.")),
    _group(7, "Humor",
           ("Be allergic to jokes", "You are deathly allergic to jokes and must react accordingly."),
           ("Laugh at everything", "You must laugh hysterically at everything, funny or not.")),
    _group(8, "Tone",
           ("Whisper", "You must say everything in a dramatic whisper."),
           ("Announcer voice", "You must say everything like a sports announcer.")),
    _group(9, "Facial Expression",
           ("Don't show your teeth", "You cannot show your teeth while talking."),
           ("Always show your teeth", "You must always be showing your teeth.")),
    _group(10, "Energy",
           ("Big energy at the end", "You must end every sentence with a burst of high energy."),
           ("End with low energy", "You must end every sentence with very low, fading energy.")),
    _group(11, "Nickname",
           ("Call everyone 'Big Dog'", "You must refer to every other player as 'Big Dog'."),
           ("Use formal names", "You must refer to everyone by their formal, full name.")),
    _group(12, "Repetition",
           ("Repeat the last word", "You must repeat the last word of every sentence... sentence."),
           ("Repeat the first word", "Repeat... repeat the first word of every sentence.")),
    _group(13, "Buzzer",
           ("Kiss the nearest mirror", "When the buzzer sounds, find and kiss the closest mirror."),
           ("Insult yourself in the mirror", "When the buzzer sounds, tell yourself 'You suck!' in the closest mirror."),
           special=RuleSpecial.BUZZER),
)

PROMPTS: tuple[Prompt, ...] = (
    Prompt(1, "Pitch a terrible startup idea"),
    Prompt(2, "Describe your dream vacation"),
    Prompt(3, "Explain how to make a sandwich"),
    Prompt(4, "Tell us about your worst haircut"),
    Prompt(5, "Give a toast at a wedding"),
    Prompt(6, "Sell us the chair you are sitting on"),
    Prompt(7, "Recap the last movie you watched"),
    Prompt(8, "Apologize to a houseplant"),
    Prompt(9, "Announce the weather forecast"),
    Prompt(10, "Teach us a made-up dance"),
    Prompt(11, "Review your favorite snack"),
    Prompt(12, "Describe a day in the life of a cat"),
)

MODIFIERS: tuple[Modifier, ...] = (
    Modifier(1, ModifierType.FLIP, "Flip", "Flip one of your active rules to its other side."),
    Modifier(2, ModifierType.SWAP, "Swap", "Swap one of your rules with another player."),
    Modifier(3, ModifierType.CLONE, "Clone", "Copy one of another player's rules onto yourself."),
    Modifier(4, ModifierType.LEFT, "Pass Left", "Pass one of your rules to the player on your left."),
    Modifier(5, ModifierType.RIGHT, "Pass Right", "Pass one of your rules to the player on your right."),
)

DEFAULT_CATALOG = Catalog(
    rule_groups=RULE_GROUPS, prompts=PROMPTS, modifiers=MODIFIERS,
)
