"""
Hand-authored entities served when the corpus yields nothing.

Two tiers: a small fallback set used when a scan finds no entities of a type,
and a single placeholder used when the scan itself fails.
"""

from adhkar.models import Remembrance, Supplication

_MORNING_ARABIC = (
    "أَصْبَحْنَا وَأَصْبَحَ الْمُلْكُ لِلَّهِ، وَالْحَمْدُ لِلَّهِ، لاَ إِلَـهَ إِلاَّ اللهُ "
    "وَحْدَهُ لاَ شَرِيكَ لَهُ، لَهُ الْمُلْكُ وَلَهُ الْحَمْدُ وَهُوَ عَلَى كُلِّ شَيْءٍ قَدِيرٌ"
)

_EVENING_ARABIC = (
    "أَمْسَيْنَا وَأَمْسَى الْمُلْكُ للهِ، وَالْحَمْدُ للهِ، لَا إِلَهَ إِلَّا اللهُ "
    "وَحْدَهُ لَا شَرِيكَ لَهُ، لَهُ الْمُلْكُ وَلَهُ الْحَمْدُ، وَهُوَ عَلَى كُلِّ شَيْءٍ قَدِيرٌ"
)

FALLBACK_SUPPLICATIONS: tuple[Supplication, ...] = (
    Supplication(
        id="dua-morning-1",
        title="Morning supplication",
        arabic=_MORNING_ARABIC,
        transliteration=(
            "Asbahna wa asbahal-mulku lillah, walhamdu lillah, la ilaha illallahu "
            "wahdahu la shareeka lah, lahul-mulku wa lahul-hamd, wa huwa 'ala kulli "
            "shay'in qadeer."
        ),
        translation=(
            "We have entered a new day and with it all the kingdom belongs to Allah. "
            "Praise be to Allah. None has the right to be worshipped but Allah alone, "
            "Who has no partner."
        ),
        reference="Muslim 2723",
        category="Morning Adhkar",
        tags=["morning", "protection", "praise"],
        benefits="Whoever says this in the morning will be protected throughout the day.",
    ),
    Supplication(
        id="dua-evening-1",
        title="Evening supplication",
        arabic=_EVENING_ARABIC,
        transliteration=(
            "Amsayna wa amsal-mulku lillah, walhamdu lillah, la ilaha illallahu "
            "wahdahu la shareeka lah, lahul-mulku wa lahul-hamd, wa huwa 'ala kulli "
            "shay'in qadeer."
        ),
        translation=(
            "We have entered a new evening and with it all the kingdom belongs to Allah. "
            "Praise be to Allah. None has the right to be worshipped but Allah alone, "
            "Who has no partner."
        ),
        reference="Muslim 2723",
        category="Evening Adhkar",
        tags=["evening", "protection", "praise"],
        benefits="Whoever says this in the evening will be protected throughout the night.",
    ),
)

FALLBACK_REMEMBRANCES: tuple[Remembrance, ...] = (
    Remembrance(
        id="zikr-morning-1",
        arabic="سُبْحَانَ اللَّهِ وَبِحَمْدِهِ",
        description=(
            "Glory is to Allah and praise is to Him. "
            "Repeat 100 times in the morning for tremendous rewards."
        ),
        reference="Muslim 2692",
        category="Morning Adhkar",
        count=100,
    ),
    Remembrance(
        id="zikr-evening-1",
        arabic=(
            "لَا إِلَهَ إِلَّا اللَّهُ وَحْدَهُ لَا شَرِيكَ لَهُ، لَهُ الْمُلْكُ وَلَهُ الْحَمْدُ، "
            "وَهُوَ عَلَى كُلِّ شَيْءٍ قَدِيرٌ"
        ),
        description=(
            "None has the right to be worshipped but Allah alone, Who has no partner. "
            "His is the dominion and His is the praise and He is Able to do all things. "
            "Repeat 10 times in the evening."
        ),
        reference="Bukhari 3293",
        category="Evening Adhkar",
        count=10,
    ),
)

PLACEHOLDER_SUPPLICATION = Supplication(
    id="dua-fallback",
    title="Fallback Dua",
    arabic="سُبْحَانَ اللَّهِ وَبِحَمْدِهِ",
    transliteration="Subhanallahi wa bihamdihi",
    translation="Glory is to Allah and praise is to Him",
    reference="Bukhari",
    category="General",
    tags=["general"],
)

PLACEHOLDER_REMEMBRANCE = Remembrance(
    id="zikr-fallback",
    arabic="لا إله إلا الله",
    description="There is no god but Allah",
    reference="General",
    category="General",
    count=3,
)
