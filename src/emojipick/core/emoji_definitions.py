# -*- coding: utf-8 -*-
"""
src/emojipick/core/emoji_definitions.py

The master emoji table.

Every dataset the resolver hands out is a filtered view of this table: a
dataset for emoji version V holds each entry whose `unicode_version` is at
most V, in the order listed here. Entries therefore only ever get appended
to a category, never reordered or removed, so newer datasets stay supersets
of older ones.
"""

from typing import Dict, Sequence, Tuple

from .categories import EmojiCategoryType
from .emoji_entry import EmojiEntry


def _entry(code_points: Sequence[int], search_key: str, version: float, tone: bool = False) -> EmojiEntry:
    return EmojiEntry(
        code_points=tuple(code_points),
        supports_skin_tone=tone,
        search_key=search_key,
        unicode_version=version,
    )


_PEOPLE = (
    _entry([0x1F600], "grinning face", 1.0),                              # 😀
    _entry([0x1F602], "face with tears of joy", 1.0),                     # 😂
    _entry([0x1F923], "rolling on the floor laughing", 3.0),              # 🤣
    _entry([0x1F60D], "smiling face with heart-eyes", 1.0),               # 😍
    _entry([0x1F914], "thinking face", 1.0),                              # 🤔
    _entry([0x1F929], "star-struck", 5.0),                                # 🤩
    _entry([0x1F92F], "exploding head", 5.0),                             # 🤯
    _entry([0x1F970], "smiling face with hearts", 11.0),                  # 🥰
    _entry([0x1F973], "partying face", 11.0),                             # 🥳
    _entry([0x1F97A], "pleading face", 11.0),                             # 🥺
    _entry([0x1F976], "cold face", 11.0),                                 # 🥶
    _entry([0x1F971], "yawning face", 12.0),                              # 🥱
    _entry([0x1F972], "smiling face with tear", 13.0),                    # 🥲
    _entry([0x1F978], "disguised face", 13.0),                            # 🥸
    _entry([0x1F636, 0x200D, 0x1F32B, 0xFE0F], "face in clouds", 13.1),   # 😶‍🌫️
    _entry([0x1F62E, 0x200D, 0x1F4A8], "face exhaling", 13.1),            # 😮‍💨
    _entry([0x1F635, 0x200D, 0x1F4AB], "face with spiral eyes", 13.1),    # 😵‍💫
    _entry([0x1FAE0], "melting face", 14.0),                              # 🫠
    _entry([0x1FAE1], "saluting face", 14.0),                             # 🫡
    _entry([0x1F979], "face holding back tears", 14.0),                   # 🥹
    _entry([0x1F44B], "waving hand", 1.0, tone=True),                     # 👋
    _entry([0x270B], "raised hand", 1.0, tone=True),                      # ✋
    _entry([0x1F44D], "thumbs up", 1.0, tone=True),                       # 👍
    _entry([0x1F44F], "clapping hands", 1.0, tone=True),                  # 👏
    _entry([0x1F64F], "folded hands", 1.0, tone=True),                    # 🙏
    _entry([0x1F4AA], "flexed biceps", 1.0, tone=True),                   # 💪
    _entry([0x1F91F], "love-you gesture", 5.0, tone=True),                # 🤟
    _entry([0x1F476], "baby", 1.0, tone=True),                            # 👶
    _entry([0x1F9D2], "child", 5.0, tone=True),                           # 🧒
    _entry([0x1F469], "woman", 1.0, tone=True),                           # 👩
    _entry([0x1F468], "man", 1.0, tone=True),                             # 👨
    _entry([0x1F46E, 0x200D, 0x2640, 0xFE0F], "woman police officer", 4.0, tone=True),  # 👮‍♀️
    _entry([0x1F469, 0x200D, 0x1F4BB], "woman technologist", 4.0, tone=True),           # 👩‍💻
    _entry([0x1F9D9], "mage", 5.0, tone=True),                            # 🧙
    _entry([0x1F9B5], "leg", 11.0, tone=True),                            # 🦵
    _entry([0x1F9B8], "superhero", 11.0, tone=True),                      # 🦸
    _entry([0x1F90F], "pinching hand", 12.0, tone=True),                  # 🤏
    _entry([0x1F9CF], "deaf person", 12.0, tone=True),                    # 🧏
    _entry([0x1F90C], "pinched fingers", 13.0, tone=True),                # 🤌
    _entry([0x1F977], "ninja", 13.0, tone=True),                          # 🥷
    _entry([0x1FAC0], "anatomical heart", 13.0),                          # 🫀
    _entry([0x1F9D4, 0x200D, 0x2640, 0xFE0F], "woman beard", 13.1, tone=True),          # 🧔‍♀️
    _entry([0x1FAF6], "heart hands", 14.0, tone=True),                    # 🫶
    _entry([0x1FAF5], "index pointing at the viewer", 14.0, tone=True),   # 🫵
    _entry([0x1FAC3], "pregnant man", 14.0, tone=True),                   # 🫃
)

_NATURE = (
    _entry([0x1F436], "dog face", 1.0),                                   # 🐶
    _entry([0x1F431], "cat face", 1.0),                                   # 🐱
    _entry([0x1F98A], "fox", 3.0),                                        # 🦊
    _entry([0x1F43B], "bear", 1.0),                                       # 🐻
    _entry([0x1F43C], "panda", 1.0),                                      # 🐼
    _entry([0x1F981], "lion", 1.0),                                       # 🦁
    _entry([0x1F984], "unicorn", 1.0),                                    # 🦄
    _entry([0x1F993], "zebra", 5.0),                                      # 🦓
    _entry([0x1F335], "cactus", 1.0),                                     # 🌵
    _entry([0x1F338], "cherry blossom", 1.0),                             # 🌸
    _entry([0x1F340], "four leaf clover", 1.0),                           # 🍀
    _entry([0x1F999], "llama", 11.0),                                     # 🦙
    _entry([0x1F99A], "peacock", 11.0),                                   # 🦚
    _entry([0x1F99D], "raccoon", 11.0),                                   # 🦝
    _entry([0x1F9A5], "sloth", 12.0),                                     # 🦥
    _entry([0x1F9A9], "flamingo", 12.0),                                  # 🦩
    _entry([0x1F9A6], "otter", 12.0),                                     # 🦦
    _entry([0x1F9AC], "bison", 13.0),                                     # 🦬
    _entry([0x1F43B, 0x200D, 0x2744, 0xFE0F], "polar bear", 13.0),        # 🐻‍❄️
    _entry([0x1FAB6], "feather", 13.0),                                   # 🪶
    _entry([0x1FAB4], "potted plant", 13.0),                              # 🪴
    _entry([0x1FAB8], "coral", 14.0),                                     # 🪸
    _entry([0x1FAB7], "lotus", 14.0),                                     # 🪷
    _entry([0x1FAB9], "empty nest", 14.0),                                # 🪹
)

_FOOD_AND_DRINK = (
    _entry([0x1F34F], "green apple", 1.0),                                # 🍏
    _entry([0x1F34C], "banana", 1.0),                                     # 🍌
    _entry([0x1F353], "strawberry", 1.0),                                 # 🍓
    _entry([0x1F951], "avocado", 3.0),                                    # 🥑
    _entry([0x1F355], "pizza", 1.0),                                      # 🍕
    _entry([0x1F354], "hamburger", 1.0),                                  # 🍔
    _entry([0x1F32E], "taco", 1.0),                                       # 🌮
    _entry([0x1F966], "broccoli", 5.0),                                   # 🥦
    _entry([0x1F968], "pretzel", 5.0),                                    # 🥨
    _entry([0x2615], "hot beverage", 1.0),                                # ☕
    _entry([0x1F96D], "mango", 11.0),                                     # 🥭
    _entry([0x1F96F], "bagel", 11.0),                                     # 🥯
    _entry([0x1F9C1], "cupcake", 11.0),                                   # 🧁
    _entry([0x1F9C4], "garlic", 12.0),                                    # 🧄
    _entry([0x1F9C7], "waffle", 12.0),                                    # 🧇
    _entry([0x1F9CB], "bubble tea", 13.0),                                # 🧋
    _entry([0x1FAD0], "blueberries", 13.0),                               # 🫐
    _entry([0x1FAD6], "teapot", 13.0),                                    # 🫖
    _entry([0x1FAD8], "beans", 14.0),                                     # 🫘
    _entry([0x1FAD7], "pouring liquid", 14.0),                            # 🫗
    _entry([0x1FAD9], "jar", 14.0),                                       # 🫙
)

_ACTIVITY = (
    _entry([0x26BD], "soccer ball", 1.0),                                 # ⚽
    _entry([0x1F3C0], "basketball", 1.0),                                 # 🏀
    _entry([0x1F3BE], "tennis", 1.0),                                     # 🎾
    _entry([0x1F3AF], "bullseye", 1.0),                                   # 🎯
    _entry([0x1F3AE], "video game", 1.0),                                 # 🎮
    _entry([0x1F3B2], "game die", 1.0),                                   # 🎲
    _entry([0x1F94A], "boxing glove", 3.0),                               # 🥊
    _entry([0x1F3C4], "person surfing", 1.0, tone=True),                  # 🏄
    _entry([0x1F6B4], "person biking", 1.0, tone=True),                   # 🚴
    _entry([0x1F9D7], "person climbing", 5.0, tone=True),                 # 🧗
    _entry([0x1F94E], "softball", 11.0),                                  # 🥎
    _entry([0x1F9E9], "puzzle piece", 11.0),                              # 🧩
    _entry([0x1FA80], "yo-yo", 12.0),                                     # 🪀
    _entry([0x1FA81], "kite", 12.0),                                      # 🪁
    _entry([0x1F93F], "diving mask", 12.0),                               # 🤿
    _entry([0x1FA84], "magic wand", 13.0),                                # 🪄
    _entry([0x1FA85], "pinata", 13.0),                                    # 🪅
    _entry([0x1FAA9], "mirror ball", 14.0),                               # 🪩
)

_TRAVEL_AND_PLACES = (
    _entry([0x1F697], "automobile", 1.0),                                 # 🚗
    _entry([0x1F68C], "bus", 1.0),                                        # 🚌
    _entry([0x1F691], "ambulance", 1.0),                                  # 🚑
    _entry([0x2708, 0xFE0F], "airplane", 1.0),                            # ✈️
    _entry([0x1F680], "rocket", 1.0),                                     # 🚀
    _entry([0x1F6B2], "bicycle", 1.0),                                    # 🚲
    _entry([0x26F5], "sailboat", 1.0),                                    # ⛵
    _entry([0x1F5FD], "statue of liberty", 1.0),                          # 🗽
    _entry([0x1F30B], "volcano", 1.0),                                    # 🌋
    _entry([0x1F6F8], "flying saucer", 5.0),                              # 🛸
    _entry([0x1F9ED], "compass", 11.0),                                   # 🧭
    _entry([0x1F9F1], "brick", 11.0),                                     # 🧱
    _entry([0x1F6F9], "skateboard", 11.0),                                # 🛹
    _entry([0x1F6D5], "hindu temple", 12.0),                              # 🛕
    _entry([0x1F6FA], "auto rickshaw", 12.0),                             # 🛺
    _entry([0x1FA90], "ringed planet", 12.0),                             # 🪐
    _entry([0x1F6D6], "hut", 13.0),                                       # 🛖
    _entry([0x1F6FB], "pickup truck", 13.0),                              # 🛻
    _entry([0x1FAA8], "rock", 13.0),                                      # 🪨
    _entry([0x1F6DD], "playground slide", 14.0),                          # 🛝
    _entry([0x1F6DE], "wheel", 14.0),                                     # 🛞
    _entry([0x1F6DF], "ring buoy", 14.0),                                 # 🛟
)

_OBJECTS = (
    _entry([0x231A], "watch", 1.0),                                       # ⌚
    _entry([0x1F4F1], "mobile phone", 1.0),                               # 📱
    _entry([0x1F4BB], "laptop", 1.0),                                     # 💻
    _entry([0x1F4F7], "camera", 1.0),                                     # 📷
    _entry([0x1F4A1], "light bulb", 1.0),                                 # 💡
    _entry([0x1F4DA], "books", 1.0),                                      # 📚
    _entry([0x1F511], "key", 1.0),                                        # 🔑
    _entry([0x1F528], "hammer", 1.0),                                     # 🔨
    _entry([0x1F9E3], "scarf", 5.0),                                      # 🧣
    _entry([0x1F9E6], "socks", 5.0),                                      # 🧦
    _entry([0x1F9F2], "magnet", 11.0),                                    # 🧲
    _entry([0x1F9EA], "test tube", 11.0),                                 # 🧪
    _entry([0x1F9F0], "toolbox", 11.0),                                   # 🧰
    _entry([0x1FA91], "chair", 12.0),                                     # 🪑
    _entry([0x1FA7A], "stethoscope", 12.0),                               # 🩺
    _entry([0x1FA93], "axe", 12.0),                                       # 🪓
    _entry([0x1FA99], "coin", 13.0),                                      # 🪙
    _entry([0x1FA9B], "screwdriver", 13.0),                               # 🪛
    _entry([0x1FA9E], "mirror", 13.0),                                    # 🪞
    _entry([0x1FAAB], "low battery", 14.0),                               # 🪫
    _entry([0x1FA7B], "x-ray", 14.0),                                     # 🩻
    _entry([0x1FAAA], "identification card", 14.0),                       # 🪪
)

_SYMBOLS = (
    _entry([0x2764, 0xFE0F], "red heart", 1.0),                           # ❤️
    _entry([0x1F49B], "yellow heart", 1.0),                               # 💛
    _entry([0x1F499], "blue heart", 1.0),                                 # 💙
    _entry([0x1F5A4], "black heart", 3.0),                                # 🖤
    _entry([0x1F9E1], "orange heart", 5.0),                               # 🧡
    _entry([0x1F494], "broken heart", 1.0),                               # 💔
    _entry([0x2705], "check mark button", 1.0),                           # ✅
    _entry([0x274C], "cross mark", 1.0),                                  # ❌
    _entry([0x2753], "red question mark", 1.0),                           # ❓
    _entry([0x267B, 0xFE0F], "recycling symbol", 1.0),                    # ♻️
    _entry([0x267E, 0xFE0F], "infinity", 11.0),                           # ♾️
    _entry([0x1F9FF], "nazar amulet", 11.0),                              # 🧿
    _entry([0x1F90D], "white heart", 12.0),                               # 🤍
    _entry([0x1F7E0], "orange circle", 12.0),                             # 🟠
    _entry([0x1F7E9], "green square", 12.0),                              # 🟩
    _entry([0x26A7, 0xFE0F], "transgender symbol", 13.0),                 # ⚧️
    _entry([0x2764, 0xFE0F, 0x200D, 0x1F525], "heart on fire", 13.1),     # ❤️‍🔥
    _entry([0x2764, 0xFE0F, 0x200D, 0x1FA79], "mending heart", 13.1),     # ❤️‍🩹
    _entry([0x1F7F0], "heavy equals sign", 14.0),                         # 🟰
    _entry([0x1FAAC], "hamsa", 14.0),                                     # 🪬
)

_FLAGS = (
    _entry([0x1F3C1], "chequered flag", 1.0),                             # 🏁
    _entry([0x1F6A9], "triangular flag", 1.0),                            # 🚩
    _entry([0x1F38C], "crossed flags", 1.0),                              # 🎌
    _entry([0x1F3F4], "black flag", 1.0),                                 # 🏴
    _entry([0x1F3F3, 0xFE0F], "white flag", 1.0),                         # 🏳️
    _entry([0x1F3F3, 0xFE0F, 0x200D, 0x1F308], "rainbow flag", 4.0),      # 🏳️‍🌈
    _entry([0x1F1FA, 0x1F1F3], "flag united nations", 4.0),               # 🇺🇳
    _entry([0x1F1EF, 0x1F1F5], "flag japan", 1.0),                        # 🇯🇵
    _entry([0x1F1FA, 0x1F1F8], "flag united states", 1.0),                # 🇺🇸
    _entry([0x1F1EB, 0x1F1F7], "flag france", 1.0),                       # 🇫🇷
    _entry([0x1F1E9, 0x1F1EA], "flag germany", 1.0),                      # 🇩🇪
    _entry([0x1F1EC, 0x1F1E7], "flag united kingdom", 1.0),               # 🇬🇧
    _entry([0x1F1FA, 0x1F1E6], "flag ukraine", 2.0),                      # 🇺🇦
    _entry([0x1F1E7, 0x1F1F7], "flag brazil", 2.0),                       # 🇧🇷
    _entry([0x1F1EE, 0x1F1F3], "flag india", 2.0),                        # 🇮🇳
    _entry([0x1F3F4, 0xE0067, 0xE0062, 0xE0073, 0xE0063, 0xE0074, 0xE007F],
           "flag scotland", 5.0),                                         # 🏴󠁧󠁢󠁳󠁣󠁴󠁿
    _entry([0x1F3F4, 0x200D, 0x2620, 0xFE0F], "pirate flag", 11.0),       # 🏴‍☠️
    _entry([0x1F3F3, 0xFE0F, 0x200D, 0x26A7, 0xFE0F], "transgender flag", 13.0),  # 🏳️‍⚧️
)

EMOJI_DEFINITIONS: Dict[EmojiCategoryType, Tuple[EmojiEntry, ...]] = {
    EmojiCategoryType.PEOPLE: _PEOPLE,
    EmojiCategoryType.NATURE: _NATURE,
    EmojiCategoryType.FOOD_AND_DRINK: _FOOD_AND_DRINK,
    EmojiCategoryType.ACTIVITY: _ACTIVITY,
    EmojiCategoryType.TRAVEL_AND_PLACES: _TRAVEL_AND_PLACES,
    EmojiCategoryType.OBJECTS: _OBJECTS,
    EmojiCategoryType.SYMBOLS: _SYMBOLS,
    EmojiCategoryType.FLAGS: _FLAGS,
}
