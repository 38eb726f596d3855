"""Default word lists for random_username_lib.

Words start with a lowercase letter; multi-word entries are camelCase so that
the generated names stay free of whitespace (e.g. "electricBlue").

Changing the order or contents of these lists changes which name a given
random sequence produces, so seeded names will differ after an edit.
"""

SEA_CREATURES = (
    'walrus', 'seal', 'fish', 'shark', 'clam', 'coral', 'whale', 'crab',
    'lobster', 'starfish', 'eel', 'dolphin', 'squid', 'jellyfish', 'ray',
    'shrimp', 'mantaRay', 'angler', 'snorkler', 'scubaDiver', 'urchin',
    'anemone', 'morel', 'axolotl')

SEA_OBJECTS = (
    'boat', 'ship', 'submarine', 'yacht', 'dinghy', 'raft', 'kelp', 'seaweed',
    'anchor')

ADJECTIVE_DESCRIPTORS = (
    'cute', 'adorable', 'lovable', 'happy', 'sandy', 'bubbly', 'friendly',
    'floating', 'drifting')

SIZE_DESCRIPTORS = (
    'large', 'big', 'small', 'giant', 'massive', 'tiny', 'little', 'yuge')

# Only used with SEA_CREATURES; a boat is not "swimming".
CREATURE_VERBS = ('swimming', 'sleeping', 'eating', 'hiding')

DESCRIPTORS = ADJECTIVE_DESCRIPTORS + SIZE_DESCRIPTORS

CREATURE_DESCRIPTORS = DESCRIPTORS + CREATURE_VERBS

COLORS = (
    'blue', 'blueGreen', 'darkCyan', 'electricBlue', 'greenBlue', 'lightCyan',
    'lightSeaGreen', 'seaGreen', 'turquoise', 'aqua', 'aquamarine', 'teal',
    'cyan', 'gray', 'darkBlue', 'cerulean', 'azure', 'lapis', 'navy')
