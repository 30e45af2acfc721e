"""
Gitmoji 意图目录 - 提交意图与版本级别的静态映射

每个意图同时拥有文本代码（如 ``:sparkles:``）和表情符号（如 ✨），
两种形式在提交信息中等价识别。目录在导入时构建一次，之后只读。
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Severity(Enum):
    """版本级别（语义化版本中受影响的部分）"""
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    OTHER = "other"


@dataclass(frozen=True)
class Emoji:
    """
    意图的两种符号形式

    Attributes:
        glyph: 表情符号（可能包含 U+FE0F 变体选择符）
        shortcode: 文本代码，形如 ``:name:``
    """
    glyph: str
    shortcode: str


class Gitmoji(Enum):
    """
    提交意图目录

    声明顺序即匹配优先级：先 major，再 minor、patch、other。
    一条提交信息包含多个意图符号时，取声明顺序中的第一个。
    """

    # major
    BOOM = ("💥", ":boom:", Severity.MAJOR, "Introduce breaking changes.")

    # minor
    SPARKLES = ("✨", ":sparkles:", Severity.MINOR, "Introduce new features.")
    CHILDREN_CROSSING = ("🚸", ":children_crossing:", Severity.MINOR, "Improve user experience / usability.")
    LIPSTICK = ("💄", ":lipstick:", Severity.MINOR, "Add or update the UI and style files.")
    IPHONE = ("📱", ":iphone:", Severity.MINOR, "Work on responsive design.")
    EGG = ("🥚", ":egg:", Severity.MINOR, "Add or update an easter egg.")
    CHART_WITH_UPWARDS_TREND = ("📈", ":chart_with_upwards_trend:", Severity.MINOR, "Add or update analytics or track code.")
    HEAVY_PLUS_SIGN = ("➕", ":heavy_plus_sign:", Severity.MINOR, "Add a dependency.")
    HEAVY_MINUS_SIGN = ("➖", ":heavy_minus_sign:", Severity.MINOR, "Remove a dependency.")
    PASSPORT_CONTROL = ("🛂", ":passport_control:", Severity.MINOR, "Work on code related to authorization, roles and permissions.")

    # patch
    ART = ("🎨", ":art:", Severity.PATCH, "Improve structure / format of the code.")
    AMBULANCE = ("🚑️", ":ambulance:", Severity.PATCH, "Critical hotfix.")
    LOCK = ("🔒️", ":lock:", Severity.PATCH, "Fix security or privacy issues.")
    BUG = ("🐛", ":bug:", Severity.PATCH, "Fix a bug.")
    ZAP = ("⚡️", ":zap:", Severity.PATCH, "Improve performance.")
    GOAL_NET = ("🥅", ":goal_net:", Severity.PATCH, "Catch errors.")
    ALIEN = ("👽️", ":alien:", Severity.PATCH, "Update code due to external API changes.")
    WHEELCHAIR = ("♿️", ":wheelchair:", Severity.PATCH, "Improve accessibility.")
    SPEECH_BALLOON = ("💬", ":speech_balloon:", Severity.PATCH, "Add or update text and literals.")
    MAG = ("🔍️", ":mag:", Severity.PATCH, "Improve SEO.")
    FIRE = ("🔥", ":fire:", Severity.PATCH, "Remove code or files.")
    WHITE_CHECK_MARK = ("✅", ":white_check_mark:", Severity.PATCH, "Add, update, or pass tests.")
    CLOSED_LOCK_WITH_KEY = ("🔐", ":closed_lock_with_key:", Severity.PATCH, "Add or update secrets.")
    ROTATING_LIGHT = ("🚨", ":rotating_light:", Severity.PATCH, "Fix compiler / linter warnings.")
    GREEN_HEART = ("💚", ":green_heart:", Severity.PATCH, "Fix CI Build.")
    ARROW_DOWN = ("⬇️", ":arrow_down:", Severity.PATCH, "Downgrade dependencies.")
    ARROW_UP = ("⬆️", ":arrow_up:", Severity.PATCH, "Upgrade dependencies.")
    PUSHPIN = ("📌", ":pushpin:", Severity.PATCH, "Pin dependencies to specific versions.")
    CONSTRUCTION_WORKER = ("👷", ":construction_worker:", Severity.PATCH, "Add or update CI build system.")
    RECYCLE = ("♻️", ":recycle:", Severity.PATCH, "Refactor code.")
    WRENCH = ("🔧", ":wrench:", Severity.PATCH, "Add or update configuration files.")
    HAMMER = ("🔨", ":hammer:", Severity.PATCH, "Add or update development scripts.")
    GLOBE_WITH_MERIDIANS = ("🌐", ":globe_with_meridians:", Severity.PATCH, "Internationalization and localization.")
    PACKAGE = ("📦️", ":package:", Severity.PATCH, "Add or update compiled files or packages.")
    TRUCK = ("🚚", ":truck:", Severity.PATCH, "Move or rename resources (e.g.: files, paths, routes).")
    BENTO = ("🍱", ":bento:", Severity.PATCH, "Add or update assets.")
    CARD_FILE_BOX = ("🗃️", ":card_file_box:", Severity.PATCH, "Perform database related changes.")
    LOUD_SOUND = ("🔊", ":loud_sound:", Severity.PATCH, "Add or update logs.")
    MUTE = ("🔇", ":mute:", Severity.PATCH, "Remove logs.")
    BUILDING_CONSTRUCTION = ("🏗️", ":building_construction:", Severity.PATCH, "Make architectural changes.")
    CAMERA_FLASH = ("📸", ":camera_flash:", Severity.PATCH, "Add or update snapshots.")
    LABEL = ("🏷️", ":label:", Severity.PATCH, "Add or update types.")
    SEEDLING = ("🌱", ":seedling:", Severity.PATCH, "Add or update seed files.")
    TRIANGULAR_FLAG_ON_POST = ("🚩", ":triangular_flag_on_post:", Severity.PATCH, "Add, update, or remove feature flags.")
    DIZZY = ("💫", ":dizzy:", Severity.PATCH, "Add or update animations and transitions.")
    ADHESIVE_BANDAGE = ("🩹", ":adhesive_bandage:", Severity.PATCH, "Simple fix for a non-critical issue.")
    MONOCLE_FACE = ("🧐", ":monocle_face:", Severity.PATCH, "Data exploration/inspection.")
    NECKTIE = ("👔", ":necktie:", Severity.PATCH, "Add or update business logic.")
    STETHOSCOPE = ("🩺", ":stethoscope:", Severity.PATCH, "Add or update healthcheck.")
    TECHNOLOGIST = ("🧑‍💻", ":technologist:", Severity.PATCH, "Improve developer experience.")
    THREAD = ("🧵", ":thread:", Severity.PATCH, "Add or update code related to multithreading or concurrency.")
    SAFETY_VEST = ("🦺", ":safety_vest:", Severity.PATCH, "Add or update code related to validation.")

    # other
    MEMO = ("📝", ":memo:", Severity.OTHER, "Add or update documentation.")
    ROCKET = ("🚀", ":rocket:", Severity.OTHER, "Deploy stuff.")
    TADA = ("🎉", ":tada:", Severity.OTHER, "Begin a project.")
    BOOKMARK = ("🔖", ":bookmark:", Severity.OTHER, "Release / Version tags.")
    CONSTRUCTION = ("🚧", ":construction:", Severity.OTHER, "Work in progress.")
    PENCIL2 = ("✏️", ":pencil2:", Severity.OTHER, "Fix typos.")
    POOP = ("💩", ":poop:", Severity.OTHER, "Write bad code that needs to be improved.")
    REWIND = ("⏪️", ":rewind:", Severity.OTHER, "Revert changes.")
    TWISTED_RIGHTWARDS_ARROWS = ("🔀", ":twisted_rightwards_arrows:", Severity.OTHER, "Merge branches.")
    PAGE_FACING_UP = ("📄", ":page_facing_up:", Severity.OTHER, "Add or update license.")
    BULB = ("💡", ":bulb:", Severity.OTHER, "Add or update comments in source code.")
    BEERS = ("🍻", ":beers:", Severity.OTHER, "Write code drunkenly.")
    BUST_IN_SILHOUETTE = ("👥", ":bust_in_silhouette:", Severity.OTHER, "Add or update contributor(s).")
    CLOWN_FACE = ("🤡", ":clown_face:", Severity.OTHER, "Mock things.")
    SEE_NO_EVIL = ("🙈", ":see_no_evil:", Severity.OTHER, "Add or update a .gitignore file.")
    ALEMBIC = ("⚗️", ":alembic:", Severity.OTHER, "Perform experiments.")
    WASTEBASKET = ("🗑️", ":wastebasket:", Severity.OTHER, "Deprecate code that needs to be cleaned up.")
    COFFIN = ("⚰️", ":coffin:", Severity.OTHER, "Remove dead code.")
    TEST_TUBE = ("🧪", ":test_tube:", Severity.OTHER, "Add a failing test.")
    BRICKS = ("🧱", ":bricks:", Severity.OTHER, "Infrastructure related changes.")
    MONEY_WITH_WINGS = ("💸", ":money_with_wings:", Severity.OTHER, "Add sponsorships or money related infrastructure.")

    def __init__(self, glyph: str, shortcode: str, severity: Severity, description: str):
        self.emoji = Emoji(glyph=glyph, shortcode=shortcode)
        self.severity = severity
        self.description = description

    @property
    def glyph(self) -> str:
        return self.emoji.glyph

    @property
    def shortcode(self) -> str:
        return self.emoji.shortcode

    def __str__(self) -> str:
        return self.emoji.glyph

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Gitmoji"]:
        """按完整符号（表情或文本代码）精确查找意图"""
        return SYMBOL_INDEX.get(symbol)


# ============================================================
# 只读索引
# ============================================================

def _build_symbol_index() -> Mapping[str, Gitmoji]:
    index: dict[str, Gitmoji] = {}
    for gitmoji in Gitmoji:
        for symbol in (gitmoji.glyph, gitmoji.shortcode):
            if symbol in index:
                raise ValueError(f"Symbol {symbol!r} is used by both {index[symbol].name} and {gitmoji.name}")
            index[symbol] = gitmoji
    return MappingProxyType(index)


# 符号 -> 意图
SYMBOL_INDEX: Mapping[str, Gitmoji] = _build_symbol_index()

# 意图 -> 版本级别
SEVERITY_INDEX: Mapping[Gitmoji, Severity] = MappingProxyType(
    {gitmoji: gitmoji.severity for gitmoji in Gitmoji}
)


def gitmojis_for(severity: Severity) -> tuple[Gitmoji, ...]:
    """返回属于指定版本级别的全部意图（按声明顺序）"""
    return tuple(g for g in Gitmoji if SEVERITY_INDEX[g] is severity)


def find_intention(text: str) -> Optional[Gitmoji]:
    """
    在文本中查找第一个出现的意图符号

    子串匹配，不锚定、不分词。多个意图同时出现时，
    按 Gitmoji 声明顺序返回第一个命中的意图。

    Args:
        text: 提交信息

    Returns:
        命中的意图，未命中返回 None
    """
    for gitmoji in Gitmoji:
        if gitmoji.shortcode in text or gitmoji.glyph in text:
            return gitmoji
    return None
