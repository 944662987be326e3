"""Bundled D&D 5E reference data.

Static SRD-style data for the default compendium: the twelve core classes
with their feature progressions, the playable species, and a starter spell
list. Values follow the Player's Handbook; descriptions are abbreviated.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Ability Score Improvement Levels
# =============================================================================

STANDARD_ASI_LEVELS = (4, 8, 12, 16, 19)
FIGHTER_ASI_LEVELS = (4, 6, 8, 12, 14, 16, 19)
ROGUE_ASI_LEVELS = (4, 8, 10, 12, 16, 19)

_ASI_DESCRIPTION = "Increase one ability score by 2, or two ability scores by 1, or take a feat."


def _features(
    entries: list[tuple[int, str, str]],
    asi_levels: tuple[int, ...] = STANDARD_ASI_LEVELS,
) -> list[dict[str, Any]]:
    """Merge class features with ASI entries, ordered by level."""
    features = [
        {"level": level, "name": name, "description": description}
        for level, name, description in entries
    ]
    features.extend(
        {"level": level, "name": "Ability Score Improvement", "description": _ASI_DESCRIPTION}
        for level in asi_levels
    )
    return sorted(features, key=lambda feature: feature["level"])


# =============================================================================
# Classes
# =============================================================================

CLASSES: list[dict[str, Any]] = [
    {
        "id": "barbarian",
        "name": "Barbarian",
        "hit_die": 12,
        "primary_ability": ["Strength"],
        "saving_throws": ["Strength", "Constitution"],
        "skill_choices": {
            "choose": 2,
            "from": ["Animal Handling", "Athletics", "Intimidation", "Nature", "Perception", "Survival"],
        },
        "spellcasting": None,
        "subclasses": ["Path of the Berserker", "Path of the Wild Heart", "Path of the World Tree", "Path of the Zealot"],
        "features": _features([
            (1, "Rage", "Enter a rage as a bonus action for resistance and bonus damage."),
            (1, "Unarmored Defense", "AC equals 10 + Dexterity modifier + Constitution modifier."),
            (2, "Reckless Attack", "Gain advantage on Strength attacks; attacks against you gain advantage."),
            (2, "Danger Sense", "Advantage on Dexterity saving throws against effects you can see."),
            (3, "Primal Path", "Choose a Barbarian subclass."),
            (5, "Extra Attack", "Attack twice when you take the Attack action."),
            (5, "Fast Movement", "Speed increases by 10 feet without heavy armor."),
            (7, "Feral Instinct", "Advantage on initiative rolls."),
            (9, "Brutal Strike", "Forgo advantage to deal extra damage with a brutal strike."),
            (11, "Relentless Rage", "Drop to 1 HP instead of 0 on a successful Constitution save."),
            (15, "Persistent Rage", "Rage only ends early if you choose to end it."),
            (18, "Indomitable Might", "Strength checks use your Strength score as a minimum."),
            (20, "Primal Champion", "Strength and Constitution increase by 4, to a maximum of 25."),
        ]),
    },
    {
        "id": "bard",
        "name": "Bard",
        "hit_die": 8,
        "primary_ability": ["Charisma"],
        "saving_throws": ["Dexterity", "Charisma"],
        "skill_choices": {
            "choose": 3,
            "from": [
                "Acrobatics", "Animal Handling", "Arcana", "Athletics", "Deception", "History",
                "Insight", "Intimidation", "Investigation", "Medicine", "Nature", "Perception",
                "Performance", "Persuasion", "Religion", "Sleight of Hand", "Stealth", "Survival",
            ],
        },
        "spellcasting": {"ability": "charisma", "ritual_casting": True, "spellcasting_focus": "Musical instrument"},
        "subclasses": ["College of Dance", "College of Glamour", "College of Lore", "College of Valor"],
        "features": _features([
            (1, "Spellcasting", "Cast bard spells using Charisma."),
            (1, "Bardic Inspiration", "Grant an ally an inspiration die as a bonus action."),
            (2, "Expertise", "Gain expertise in two skills you are proficient in."),
            (2, "Jack of All Trades", "Add half your proficiency bonus to checks you are not proficient in."),
            (3, "Bard College", "Choose a Bard subclass."),
            (5, "Font of Inspiration", "Regain Bardic Inspiration on a short or long rest."),
            (7, "Countercharm", "Use music to help allies resist being charmed or frightened."),
            (9, "Expertise", "Gain expertise in two more skills."),
            (10, "Magical Secrets", "Learn spells from any class spell list."),
            (18, "Superior Inspiration", "Regain Bardic Inspiration uses when rolling initiative."),
            (20, "Words of Creation", "Always have Power Word Heal and Power Word Kill prepared."),
        ]),
    },
    {
        "id": "cleric",
        "name": "Cleric",
        "hit_die": 8,
        "primary_ability": ["Wisdom"],
        "saving_throws": ["Wisdom", "Charisma"],
        "skill_choices": {"choose": 2, "from": ["History", "Insight", "Medicine", "Persuasion", "Religion"]},
        "spellcasting": {"ability": "wisdom", "ritual_casting": True, "spellcasting_focus": "Holy symbol"},
        "subclasses": ["Life Domain", "Light Domain", "Trickery Domain", "War Domain"],
        "features": _features([
            (1, "Spellcasting", "Cast cleric spells using Wisdom."),
            (1, "Divine Order", "Choose Protector or Thaumaturge."),
            (2, "Channel Divinity", "Channel divine energy for magical effects."),
            (3, "Divine Domain", "Choose a Cleric subclass."),
            (5, "Sear Undead", "Turn Undead also deals radiant damage."),
            (7, "Blessed Strikes", "Add divine power to cantrips or weapon strikes."),
            (10, "Divine Intervention", "Call on your deity to cast a Cleric spell without a slot."),
            (14, "Improved Blessed Strikes", "Blessed Strikes grows stronger."),
            (20, "Greater Divine Intervention", "Divine Intervention can cast Wish."),
        ]),
    },
    {
        "id": "druid",
        "name": "Druid",
        "hit_die": 8,
        "primary_ability": ["Wisdom"],
        "saving_throws": ["Intelligence", "Wisdom"],
        "skill_choices": {
            "choose": 2,
            "from": ["Arcana", "Animal Handling", "Insight", "Medicine", "Nature", "Perception", "Religion", "Survival"],
        },
        "spellcasting": {"ability": "wisdom", "ritual_casting": True, "spellcasting_focus": "Druidic focus"},
        "subclasses": ["Circle of the Land", "Circle of the Moon", "Circle of the Sea", "Circle of the Stars"],
        "features": _features([
            (1, "Spellcasting", "Cast druid spells using Wisdom."),
            (1, "Druidic", "Know the secret language of druids."),
            (2, "Wild Shape", "Magically assume the shape of a beast."),
            (2, "Wild Companion", "Summon a nature spirit as a familiar."),
            (3, "Druid Circle", "Choose a Druid subclass."),
            (5, "Wild Resurgence", "Trade spell slots and Wild Shape uses."),
            (7, "Elemental Fury", "Add elemental damage to cantrips or strikes."),
            (18, "Beast Spells", "Cast spells while in Wild Shape."),
            (20, "Archdruid", "Regain Wild Shape uses and convert them to spell slots."),
        ]),
    },
    {
        "id": "fighter",
        "name": "Fighter",
        "hit_die": 10,
        "primary_ability": ["Strength", "Dexterity"],
        "saving_throws": ["Strength", "Constitution"],
        "skill_choices": {
            "choose": 2,
            "from": [
                "Acrobatics", "Animal Handling", "Athletics", "History", "Insight",
                "Intimidation", "Persuasion", "Perception", "Survival",
            ],
        },
        "spellcasting": None,
        "subclasses": ["Battle Master", "Champion", "Eldritch Knight", "Psi Warrior"],
        "features": _features(
            [
                (1, "Fighting Style", "Adopt a particular style of fighting."),
                (1, "Second Wind", "Regain hit points as a bonus action."),
                (2, "Action Surge", "Take one additional action on your turn."),
                (3, "Martial Archetype", "Choose a Fighter subclass."),
                (5, "Extra Attack", "Attack twice when you take the Attack action."),
                (9, "Indomitable", "Reroll a failed saving throw."),
                (11, "Two Extra Attacks", "Attack three times when you take the Attack action."),
                (20, "Three Extra Attacks", "Attack four times when you take the Attack action."),
            ],
            FIGHTER_ASI_LEVELS,
        ),
    },
    {
        "id": "monk",
        "name": "Monk",
        "hit_die": 8,
        "primary_ability": ["Dexterity", "Wisdom"],
        "saving_throws": ["Strength", "Dexterity"],
        "skill_choices": {
            "choose": 2,
            "from": ["Acrobatics", "Athletics", "History", "Insight", "Religion", "Stealth"],
        },
        "spellcasting": None,
        "subclasses": ["Warrior of Mercy", "Warrior of Shadow", "Warrior of the Elements", "Warrior of the Open Hand"],
        "features": _features([
            (1, "Martial Arts", "Use Dexterity for unarmed strikes and monk weapons."),
            (1, "Unarmored Defense", "AC equals 10 + Dexterity modifier + Wisdom modifier."),
            (2, "Monk's Focus", "Spend focus points on Flurry of Blows, Patient Defense and Step of the Wind."),
            (2, "Unarmored Movement", "Speed increases while not wearing armor."),
            (3, "Deflect Attacks", "Reduce damage from attacks that hit you."),
            (5, "Extra Attack", "Attack twice when you take the Attack action."),
            (5, "Stunning Strike", "Attempt to stun a creature you hit."),
            (7, "Evasion", "Take no damage on successful Dexterity saves for half damage."),
            (14, "Disciplined Survivor", "Gain proficiency in all saving throws."),
            (20, "Body and Mind", "Dexterity and Wisdom increase by 4, to a maximum of 25."),
        ]),
    },
    {
        "id": "paladin",
        "name": "Paladin",
        "hit_die": 10,
        "primary_ability": ["Strength", "Charisma"],
        "saving_throws": ["Wisdom", "Charisma"],
        "skill_choices": {
            "choose": 2,
            "from": ["Athletics", "Insight", "Intimidation", "Medicine", "Persuasion", "Religion"],
        },
        "spellcasting": {"ability": "charisma", "spellcasting_focus": "Holy symbol"},
        "subclasses": ["Oath of Devotion", "Oath of Glory", "Oath of the Ancients", "Oath of Vengeance"],
        "features": _features([
            (1, "Lay on Hands", "Heal with a pool of healing power."),
            (1, "Spellcasting", "Cast paladin spells using Charisma."),
            (2, "Fighting Style", "Adopt a particular style of fighting."),
            (2, "Divine Smite", "Expend a spell slot to deal radiant damage on a hit."),
            (3, "Sacred Oath", "Choose a Paladin subclass."),
            (5, "Extra Attack", "Attack twice when you take the Attack action."),
            (6, "Aura of Protection", "Allies near you add your Charisma modifier to saves."),
            (11, "Radiant Strikes", "Weapon hits deal extra radiant damage."),
            (18, "Aura Expansion", "Your aura extends to 30 feet."),
        ]),
    },
    {
        "id": "ranger",
        "name": "Ranger",
        "hit_die": 10,
        "primary_ability": ["Dexterity", "Wisdom"],
        "saving_throws": ["Strength", "Dexterity"],
        "skill_choices": {
            "choose": 3,
            "from": [
                "Animal Handling", "Athletics", "Insight", "Investigation",
                "Nature", "Perception", "Stealth", "Survival",
            ],
        },
        "spellcasting": {"ability": "wisdom", "spellcasting_focus": "Druidic focus"},
        "subclasses": ["Beast Master", "Fey Wanderer", "Gloom Stalker", "Hunter"],
        "features": _features([
            (1, "Favored Enemy", "Always have Hunter's Mark prepared."),
            (1, "Spellcasting", "Cast ranger spells using Wisdom."),
            (2, "Deft Explorer", "Gain expertise in one skill and two languages."),
            (2, "Fighting Style", "Adopt a particular style of fighting."),
            (3, "Ranger Archetype", "Choose a Ranger subclass."),
            (5, "Extra Attack", "Attack twice when you take the Attack action."),
            (10, "Tireless", "Gain temporary hit points and shed exhaustion on rests."),
            (18, "Feral Senses", "Gain blindsight out to 30 feet."),
            (20, "Foe Slayer", "Hunter's Mark damage die becomes a d10."),
        ]),
    },
    {
        "id": "rogue",
        "name": "Rogue",
        "hit_die": 8,
        "primary_ability": ["Dexterity"],
        "saving_throws": ["Dexterity", "Intelligence"],
        "skill_choices": {
            "choose": 4,
            "from": [
                "Acrobatics", "Athletics", "Deception", "Insight", "Intimidation", "Investigation",
                "Perception", "Performance", "Persuasion", "Sleight of Hand", "Stealth",
            ],
        },
        "spellcasting": None,
        "subclasses": ["Arcane Trickster", "Assassin", "Soulknife", "Thief"],
        "features": _features(
            [
                (1, "Expertise", "Gain expertise in two skills you are proficient in."),
                (1, "Sneak Attack", "Deal extra damage once per turn with advantage or an ally nearby."),
                (1, "Thieves' Cant", "Know the secret language of rogues."),
                (2, "Cunning Action", "Dash, Disengage or Hide as a bonus action."),
                (3, "Roguish Archetype", "Choose a Rogue subclass."),
                (5, "Uncanny Dodge", "Halve the damage of an attack you can see."),
                (7, "Evasion", "Take no damage on successful Dexterity saves for half damage."),
                (11, "Reliable Talent", "Treat d20 rolls of 9 or lower as 10 on proficient checks."),
                (18, "Elusive", "No attack roll has advantage against you."),
                (20, "Stroke of Luck", "Turn a failed d20 test into a 20."),
            ],
            ROGUE_ASI_LEVELS,
        ),
    },
    {
        "id": "sorcerer",
        "name": "Sorcerer",
        "hit_die": 6,
        "primary_ability": ["Charisma"],
        "saving_throws": ["Constitution", "Charisma"],
        "skill_choices": {
            "choose": 2,
            "from": ["Arcana", "Deception", "Insight", "Intimidation", "Persuasion", "Religion"],
        },
        "spellcasting": {"ability": "charisma", "spellcasting_focus": "Arcane focus"},
        "subclasses": ["Aberrant Sorcery", "Clockwork Sorcery", "Draconic Sorcery", "Wild Magic Sorcery"],
        "features": _features([
            (1, "Spellcasting", "Cast sorcerer spells using Charisma."),
            (1, "Innate Sorcery", "Unleash magic for bonus spell save DC and advantage."),
            (2, "Font of Magic", "Convert between sorcery points and spell slots."),
            (2, "Metamagic", "Twist your spells with metamagic options."),
            (3, "Sorcerous Origin", "Choose a Sorcerer subclass."),
            (5, "Sorcerous Restoration", "Regain sorcery points on a short rest."),
            (7, "Sorcery Incarnate", "Use Innate Sorcery with sorcery points."),
            (20, "Arcane Apotheosis", "Use one Metamagic option per turn for free."),
        ]),
    },
    {
        "id": "warlock",
        "name": "Warlock",
        "hit_die": 8,
        "primary_ability": ["Charisma"],
        "saving_throws": ["Wisdom", "Charisma"],
        "skill_choices": {
            "choose": 2,
            "from": ["Arcana", "Deception", "History", "Intimidation", "Investigation", "Nature", "Religion"],
        },
        "spellcasting": {"ability": "charisma", "spellcasting_focus": "Arcane focus"},
        "subclasses": ["Archfey Patron", "Celestial Patron", "Fiend Patron", "Great Old One Patron"],
        "features": _features([
            (1, "Eldritch Invocations", "Gain fragments of forbidden knowledge."),
            (1, "Pact Magic", "Cast warlock spells using Charisma with short-rest slots."),
            (2, "Magical Cunning", "Regain half your pact slots with a brief rite."),
            (3, "Otherworldly Patron", "Choose a Warlock subclass."),
            (9, "Contact Patron", "Always have Contact Other Plane prepared."),
            (11, "Mystic Arcanum", "Cast a 6th-level spell once per long rest."),
            (20, "Eldritch Master", "Magical Cunning restores all pact slots."),
        ]),
    },
    {
        "id": "wizard",
        "name": "Wizard",
        "hit_die": 6,
        "primary_ability": ["Intelligence"],
        "saving_throws": ["Intelligence", "Wisdom"],
        "skill_choices": {
            "choose": 2,
            "from": ["Arcana", "History", "Insight", "Investigation", "Medicine", "Nature", "Religion"],
        },
        "spellcasting": {"ability": "intelligence", "ritual_casting": True, "spellcasting_focus": "Arcane focus"},
        "subclasses": ["Abjurer", "Diviner", "Evoker", "Illusionist"],
        "features": _features([
            (1, "Spellcasting", "Cast wizard spells using Intelligence from a spellbook."),
            (1, "Ritual Adept", "Cast ritual spells from your spellbook without preparing them."),
            (1, "Arcane Recovery", "Recover expended spell slots on a short rest."),
            (2, "Scholar", "Gain expertise in one Intelligence skill."),
            (3, "Arcane Tradition", "Choose a Wizard subclass."),
            (5, "Memorize Spell", "Swap a prepared spell on a short rest."),
            (18, "Spell Mastery", "Cast a 1st and 2nd level spell at will."),
            (20, "Signature Spells", "Cast two 3rd-level spells once each without a slot."),
        ]),
    },
]


# =============================================================================
# Species
# =============================================================================

RACES: list[dict[str, Any]] = [
    {
        "id": "aasimar",
        "name": "Aasimar",
        "size": "Medium",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Celestial Resistance", "description": "Resistance to necrotic and radiant damage."},
            {"name": "Darkvision", "description": "See in dim light within 60 feet."},
            {"name": "Healing Hands", "description": "Restore hit points with a touch once per long rest."},
        ],
        "languages": ["Common", "Celestial"],
    },
    {
        "id": "dragonborn",
        "name": "Dragonborn",
        "size": "Medium",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Breath Weapon", "description": "Exhale destructive energy in a cone or line."},
            {"name": "Damage Resistance", "description": "Resistance to your draconic ancestry's damage type."},
        ],
        "languages": ["Common", "Draconic"],
    },
    {
        "id": "dwarf",
        "name": "Dwarf",
        "size": "Medium",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Darkvision", "description": "See in dim light within 120 feet."},
            {"name": "Dwarven Resilience", "description": "Resistance to poison damage."},
            {"name": "Dwarven Toughness", "description": "Hit point maximum increases by 1 per level."},
        ],
        "languages": ["Common", "Dwarvish"],
    },
    {
        "id": "elf",
        "name": "Elf",
        "size": "Medium",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Darkvision", "description": "See in dim light within 60 feet."},
            {"name": "Fey Ancestry", "description": "Advantage on saves against being charmed."},
            {"name": "Trance", "description": "Finish a long rest in 4 hours."},
        ],
        "languages": ["Common", "Elvish"],
    },
    {
        "id": "gnome",
        "name": "Gnome",
        "size": "Small",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Darkvision", "description": "See in dim light within 60 feet."},
            {"name": "Gnomish Cunning", "description": "Advantage on Intelligence, Wisdom and Charisma saves."},
        ],
        "languages": ["Common", "Gnomish"],
    },
    {
        "id": "goliath",
        "name": "Goliath",
        "size": "Medium",
        "speed": 35,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Giant Ancestry", "description": "Gain a supernatural boon from your giant lineage."},
            {"name": "Powerful Build", "description": "Count as one size larger for carrying capacity."},
        ],
        "languages": ["Common", "Giant"],
    },
    {
        "id": "halfling",
        "name": "Halfling",
        "size": "Small",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Brave", "description": "Advantage on saves against being frightened."},
            {"name": "Luck", "description": "Reroll a 1 on a d20 test."},
        ],
        "languages": ["Common", "Halfling"],
    },
    {
        "id": "human",
        "name": "Human",
        "size": "Medium",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Resourceful", "description": "Gain Heroic Inspiration after a long rest."},
            {"name": "Skillful", "description": "Gain proficiency in one skill of your choice."},
            {"name": "Versatile", "description": "Gain an Origin feat of your choice."},
        ],
        "languages": ["Common"],
    },
    {
        "id": "orc",
        "name": "Orc",
        "size": "Medium",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Adrenaline Rush", "description": "Dash as a bonus action and gain temporary hit points."},
            {"name": "Relentless Endurance", "description": "Drop to 1 HP instead of 0 once per long rest."},
        ],
        "languages": ["Common", "Orc"],
    },
    {
        "id": "tiefling",
        "name": "Tiefling",
        "size": "Medium",
        "speed": 30,
        "creature_type": "Humanoid",
        "traits": [
            {"name": "Darkvision", "description": "See in dim light within 60 feet."},
            {"name": "Fiendish Legacy", "description": "Gain a legacy granting resistance and spells."},
        ],
        "languages": ["Common", "Infernal"],
    },
]


# =============================================================================
# Spells
# =============================================================================


def _components(verbal: bool, somatic: bool, material: str | None = None) -> dict[str, Any]:
    return {
        "verbal": verbal,
        "somatic": somatic,
        "material": {"required": True, "components": material} if material else False,
    }


SPELLS: list[dict[str, Any]] = [
    {
        "id": "fire-bolt", "name": "Fire Bolt", "level": 0, "school": "Evocation",
        "casting_time": "1 action", "range": "120 feet", "components": _components(True, True),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "Hurl a mote of fire that deals 1d10 fire damage on a hit.",
        "classes": ["Sorcerer", "Wizard"],
    },
    {
        "id": "mage-hand", "name": "Mage Hand", "level": 0, "school": "Conjuration",
        "casting_time": "1 action", "range": "30 feet", "components": _components(True, True),
        "duration": "1 minute", "concentration": False, "ritual": False,
        "description": "A spectral hand manipulates objects at a distance.",
        "classes": ["Bard", "Sorcerer", "Warlock", "Wizard"],
    },
    {
        "id": "sacred-flame", "name": "Sacred Flame", "level": 0, "school": "Evocation",
        "casting_time": "1 action", "range": "60 feet", "components": _components(True, True),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "Radiance descends on a creature, which must succeed on a Dexterity save or take 1d8 radiant damage.",
        "classes": ["Cleric"],
    },
    {
        "id": "eldritch-blast", "name": "Eldritch Blast", "level": 0, "school": "Evocation",
        "casting_time": "1 action", "range": "120 feet", "components": _components(True, True),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "A beam of crackling energy deals 1d10 force damage on a hit.",
        "classes": ["Warlock"],
    },
    {
        "id": "vicious-mockery", "name": "Vicious Mockery", "level": 0, "school": "Enchantment",
        "casting_time": "1 action", "range": "60 feet", "components": _components(True, False),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "Insults laced with enchantment deal 1d6 psychic damage and impose disadvantage.",
        "classes": ["Bard"],
    },
    {
        "id": "druidcraft", "name": "Druidcraft", "level": 0, "school": "Transmutation",
        "casting_time": "1 action", "range": "30 feet", "components": _components(True, True),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "Whisper to the spirits of nature to create a minor natural effect.",
        "classes": ["Druid"],
    },
    {
        "id": "magic-missile", "name": "Magic Missile", "level": 1, "school": "Evocation",
        "casting_time": "1 action", "range": "120 feet", "components": _components(True, True),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "Three glowing darts each deal 1d4 + 1 force damage.",
        "classes": ["Sorcerer", "Wizard"],
    },
    {
        "id": "shield", "name": "Shield", "level": 1, "school": "Abjuration",
        "casting_time": "1 reaction", "range": "Self", "components": _components(True, True),
        "duration": "1 round", "concentration": False, "ritual": False,
        "description": "An invisible barrier grants +5 AC until the start of your next turn.",
        "classes": ["Sorcerer", "Wizard"],
    },
    {
        "id": "cure-wounds", "name": "Cure Wounds", "level": 1, "school": "Abjuration",
        "casting_time": "1 action", "range": "Touch", "components": _components(True, True),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "A creature you touch regains 2d8 plus your spellcasting modifier hit points.",
        "classes": ["Bard", "Cleric", "Druid", "Paladin", "Ranger"],
    },
    {
        "id": "healing-word", "name": "Healing Word", "level": 1, "school": "Abjuration",
        "casting_time": "1 bonus action", "range": "60 feet", "components": _components(True, False),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "A creature you can see regains 2d4 plus your spellcasting modifier hit points.",
        "classes": ["Bard", "Cleric", "Druid"],
    },
    {
        "id": "bless", "name": "Bless", "level": 1, "school": "Enchantment",
        "casting_time": "1 action", "range": "30 feet",
        "components": _components(True, True, "a Holy Symbol worth 5+ GP"),
        "duration": "Concentration, up to 1 minute", "concentration": True, "ritual": False,
        "description": "Up to three creatures add 1d4 to attack rolls and saving throws.",
        "classes": ["Cleric", "Paladin"],
    },
    {
        "id": "detect-magic", "name": "Detect Magic", "level": 1, "school": "Divination",
        "casting_time": "1 action", "range": "Self", "components": _components(True, True),
        "duration": "Concentration, up to 10 minutes", "concentration": True, "ritual": True,
        "description": "Sense the presence of magic within 30 feet.",
        "classes": ["Bard", "Cleric", "Druid", "Paladin", "Ranger", "Sorcerer", "Wizard"],
    },
    {
        "id": "hunters-mark", "name": "Hunter's Mark", "level": 1, "school": "Divination",
        "casting_time": "1 bonus action", "range": "90 feet", "components": _components(True, False),
        "duration": "Concentration, up to 1 hour", "concentration": True, "ritual": False,
        "description": "Mark a creature as your quarry to deal an extra 1d6 force damage.",
        "classes": ["Ranger"],
    },
    {
        "id": "hex", "name": "Hex", "level": 1, "school": "Enchantment",
        "casting_time": "1 bonus action", "range": "90 feet",
        "components": _components(True, True, "the petrified eye of a newt"),
        "duration": "Concentration, up to 1 hour", "concentration": True, "ritual": False,
        "description": "Curse a creature to take an extra 1d6 necrotic damage from your hits.",
        "classes": ["Warlock"],
    },
    {
        "id": "misty-step", "name": "Misty Step", "level": 2, "school": "Conjuration",
        "casting_time": "1 bonus action", "range": "Self", "components": _components(True, False),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "Teleport up to 30 feet to an unoccupied space you can see.",
        "classes": ["Sorcerer", "Warlock", "Wizard"],
    },
    {
        "id": "spiritual-weapon", "name": "Spiritual Weapon", "level": 2, "school": "Evocation",
        "casting_time": "1 bonus action", "range": "60 feet", "components": _components(True, True),
        "duration": "Concentration, up to 1 minute", "concentration": True, "ritual": False,
        "description": "Create a floating spectral weapon that attacks for 1d8 force damage.",
        "classes": ["Cleric"],
    },
    {
        "id": "fireball", "name": "Fireball", "level": 3, "school": "Evocation",
        "casting_time": "1 action", "range": "150 feet",
        "components": _components(True, True, "a ball of bat guano and sulfur"),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "A bright streak blossoms into an explosion dealing 8d6 fire damage.",
        "classes": ["Sorcerer", "Wizard"],
    },
    {
        "id": "revivify", "name": "Revivify", "level": 3, "school": "Necromancy",
        "casting_time": "1 action", "range": "Touch",
        "components": _components(True, True, "a diamond worth 300+ GP, which the spell consumes"),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "Return a creature that died within the last minute to life with 1 hit point.",
        "classes": ["Cleric", "Druid", "Paladin", "Ranger"],
    },
    {
        "id": "polymorph", "name": "Polymorph", "level": 4, "school": "Transmutation",
        "casting_time": "1 action", "range": "60 feet",
        "components": _components(True, True, "a caterpillar cocoon"),
        "duration": "Concentration, up to 1 hour", "concentration": True, "ritual": False,
        "description": "Transform a creature into a new beast form.",
        "classes": ["Bard", "Druid", "Sorcerer", "Wizard"],
    },
    {
        "id": "cone-of-cold", "name": "Cone of Cold", "level": 5, "school": "Evocation",
        "casting_time": "1 action", "range": "Self",
        "components": _components(True, True, "a small crystal or glass cone"),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "A blast of cold air deals 8d8 cold damage in a 60-foot cone.",
        "classes": ["Druid", "Sorcerer", "Wizard"],
    },
    {
        "id": "wish", "name": "Wish", "level": 9, "school": "Conjuration",
        "casting_time": "1 action", "range": "Self", "components": _components(True, False),
        "duration": "Instantaneous", "concentration": False, "ritual": False,
        "description": "The mightiest spell a mortal can cast; alter the very foundations of reality.",
        "classes": ["Sorcerer", "Wizard"],
    },
]


__all__ = [
    "STANDARD_ASI_LEVELS",
    "FIGHTER_ASI_LEVELS",
    "ROGUE_ASI_LEVELS",
    "CLASSES",
    "RACES",
    "SPELLS",
]
