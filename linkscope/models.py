"""Core enums and the analysis record produced for each URL."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


SUMMARY_SEPARATOR = " • "


@unique
class Platform(str, Enum):
    """Known web platforms. Values are display names."""

    # Video
    YOUTUBE = "YouTube"
    YOUTUBE_SHORTS = "YouTube Shorts"
    YOUTUBE_MUSIC = "YouTube Music"
    YOUTUBE_STUDIO = "YouTube Studio"
    YOUTUBE_GAMING = "YouTube Gaming"
    VIMEO = "Vimeo"
    DAILYMOTION = "Dailymotion"
    TWITCH = "Twitch"
    KICK = "Kick"
    VEOH = "Veoh"
    METACAFE = "Metacafe"

    # Alternative video
    RUMBLE = "Rumble"
    BITCHUTE = "BitChute"
    ODYSEE = "Odysee"
    LBRY = "LBRY"
    PEERTUBE = "PeerTube"
    DTUBE = "DTube"
    BRIGHTEON = "Brighteon"
    BANNED = "Banned.Video"
    ROKFIN = "Rokfin"
    FLOATPLANE = "Floatplane"
    NEBULA = "Nebula"

    # Short-form video
    TIKTOK = "TikTok"
    INSTAGRAM = "Instagram"
    INSTAGRAM_REELS = "Instagram Reels"
    SNAPCHAT = "Snapchat"
    DOUYIN = "Douyin"
    KUAISHOU = "Kuaishou"
    LIKEE = "Likee"
    TRILLER = "Triller"
    BYTE = "Byte"
    CLASH = "Clash"

    # Audio / music
    SPOTIFY = "Spotify"
    APPLE_MUSIC = "Apple Music"
    APPLE_PODCASTS = "Apple Podcasts"
    SOUNDCLOUD = "SoundCloud"
    BANDCAMP = "Bandcamp"
    DEEZER = "Deezer"
    TIDAL = "Tidal"
    AMAZON_MUSIC = "Amazon Music"
    PANDORA = "Pandora"
    AUDIOMACK = "Audiomack"
    QOBUZ = "Qobuz"
    MIXCLOUD = "Mixcloud"
    BEATPORT = "Beatport"
    NAPSTER = "Napster"
    IHEARTRADIO = "iHeartRadio"
    TUNEIN = "TuneIn"
    ANGHAMI = "Anghami"
    GAANA = "Gaana"
    JIOSAAVN = "JioSaavn"
    LASTFM = "Last.fm"
    GENIUS = "Genius"

    # Podcasts
    ANCHOR = "Anchor"
    PODCASTS_SPOTIFY = "Spotify for Podcasters"
    POCKET_CASTS = "Pocket Casts"
    OVERCAST = "Overcast"
    CASTBOX = "Castbox"
    GOOGLE_PODCASTS = "Google Podcasts"
    STITCHER = "Stitcher"
    PODBEAN = "Podbean"
    BUZZSPROUT = "Buzzsprout"
    PODCAST_ADDICT = "Podcast Addict"
    CASTRO = "Castro"

    # Social
    FACEBOOK = "Facebook"
    TWITTER = "Twitter/X"
    LINKEDIN = "LinkedIn"
    REDDIT = "Reddit"
    PINTEREST = "Pinterest"
    TUMBLR = "Tumblr"
    THREADS = "Threads"
    VERO = "Vero"
    ELLO = "Ello"

    # Alternative social
    MASTODON = "Mastodon"
    BLUESKY = "Bluesky"
    TRUTH_SOCIAL = "Truth Social"
    GAB = "Gab"
    PARLER = "Parler"
    MEWE = "MeWe"
    GETTR = "Gettr"
    MINDS = "Minds"
    LOCALS = "Locals"
    DIASPORA = "Diaspora"

    # Regional
    WEIBO = "Weibo"
    WECHAT = "WeChat"
    QQ = "QQ"
    XIAOHONGSHU = "Xiaohongshu"
    BILIBILI = "Bilibili"
    YOUKU = "Youku"
    NICONICO = "Niconico"
    KAKAOTALK = "KakaoTalk"
    LINE = "LINE"
    ZALO = "Zalo"
    VK = "VK"

    # Messaging
    WHATSAPP = "WhatsApp"
    TELEGRAM = "Telegram"
    DISCORD = "Discord"
    SLACK = "Slack"
    SIGNAL = "Signal"
    MESSENGER = "Messenger"
    VIBER = "Viber"
    ELEMENT = "Element"
    MATRIX = "Matrix"
    THREEMA = "Threema"
    WIRE = "Wire"
    SESSION = "Session"
    KEYBASE = "Keybase"

    # Live streaming
    TWITCH_LIVE = "Twitch Live"
    FACEBOOK_GAMING = "Facebook Gaming"
    DLIVE = "DLive"
    CAFFEINE = "Caffeine"
    TROVO = "Trovo"
    PICARTO = "Picarto"
    YOUNOW = "YouNow"
    BIGO_LIVE = "Bigo Live"
    STREAMYARD = "StreamYard"
    STREAMLABS = "Streamlabs"
    RESTREAM = "Restream"
    OBS_LIVE = "OBS Live"

    # Developer
    GITHUB = "GitHub"
    GITLAB = "GitLab"
    BITBUCKET = "Bitbucket"
    STACKOVERFLOW = "Stack Overflow"
    CODEPEN = "CodePen"
    CODESANDBOX = "CodeSandbox"
    REPLIT = "Replit"
    FIGMA = "Figma"
    DRIBBBLE = "Dribbble"
    BEHANCE = "Behance"
    ANGELLIST = "AngelList"
    PRODUCTHUNT = "Product Hunt"
    POLYWORK = "Polywork"
    WELLFOUND = "Wellfound"
    GLITCH = "Glitch"
    KAGGLE = "Kaggle"
    VERCEL = "Vercel"
    NETLIFY = "Netlify"

    # E-commerce
    AMAZON = "Amazon"
    EBAY = "eBay"
    ETSY = "Etsy"
    SHOPIFY = "Shopify"
    ALIBABA = "Alibaba"
    ALIEXPRESS = "AliExpress"
    MERCARI = "Mercari"
    POSHMARK = "Poshmark"
    DEPOP = "Depop"
    WALMART = "Walmart"
    TARGET = "Target"
    BESTBUY = "Best Buy"
    WISH = "Wish"
    SHEIN = "Shein"
    WAYFAIR = "Wayfair"

    # Gaming
    STEAM = "Steam"
    EPIC_GAMES = "Epic Games"
    BATTLENET = "Battle.net"
    ORIGIN = "Origin"
    UPLAY = "Uplay"
    GOG = "GOG"
    ITCH_IO = "itch.io"
    ROBLOX = "Roblox"
    MINECRAFT = "Minecraft"
    FORTNITE = "Fortnite"
    LEAGUE_OF_LEGENDS = "League of Legends"
    VALORANT = "Valorant"
    XBOX = "Xbox"
    PLAYSTATION = "PlayStation"
    NINTENDO = "Nintendo"

    # Financial
    PAYPAL = "PayPal"
    VENMO = "Venmo"
    CASHAPP = "Cash App"
    ZELLE = "Zelle"
    STRIPE = "Stripe"
    SQUARE = "Square"
    ALIPAY = "Alipay"
    PAYTM = "Paytm"
    KLARNA = "Klarna"
    AFTERPAY = "Afterpay"
    AFFIRM = "Affirm"
    CHIME = "Chime"
    REVOLUT = "Revolut"
    WISE = "Wise"
    ROBINHOOD = "Robinhood"
    ETORO = "eToro"
    WEBULL = "Webull"
    COINBASE = "Coinbase"
    BINANCE = "Binance"
    KRAKEN = "Kraken"
    METAMASK = "MetaMask"
    CRYPTO_DOT_COM = "Crypto.com"

    # Dating
    TINDER = "Tinder"
    BUMBLE = "Bumble"
    HINGE = "Hinge"
    MATCH = "Match"
    OKCUPID = "OkCupid"
    PLENTYOFFISH = "Plenty of Fish"
    EHARMONY = "eHarmony"
    COFFEE_MEETS_BAGEL = "Coffee Meets Bagel"
    HAPPN = "Happn"
    BADOO = "Badoo"
    GRINDR = "Grindr"
    HER = "HER"
    FEELD = "Feeld"

    # Cloud storage
    DROPBOX = "Dropbox"
    GOOGLE_DRIVE = "Google Drive"
    ONEDRIVE = "OneDrive"
    BOX = "Box"
    ICLOUD = "iCloud"
    MEGA = "MEGA"
    PCLOUD = "pCloud"
    SYNC = "Sync.com"
    MEDIAFIRE = "MediaFire"
    WETRANSFER = "WeTransfer"

    # News / publishing
    MEDIUM = "Medium"
    SUBSTACK = "Substack"
    WORDPRESS = "WordPress"
    BLOGGER = "Blogger"
    GHOST = "Ghost"
    MIRROR = "Mirror"
    REVUE = "Revue"
    CONVERTKIT = "ConvertKit"
    BEEHIIV = "beehiiv"
    HASHNODE = "Hashnode"
    DEVTO = "DEV Community"

    # E-learning
    UDEMY = "Udemy"
    COURSERA = "Coursera"
    EDX = "edX"
    SKILLSHARE = "Skillshare"
    TEACHABLE = "Teachable"
    THINKIFIC = "Thinkific"
    KAJABI = "Kajabi"
    LINKEDIN_LEARNING = "LinkedIn Learning"
    KHAN_ACADEMY = "Khan Academy"
    UDACITY = "Udacity"
    PLURALSIGHT = "Pluralsight"
    MASTERCLASS = "MasterClass"
    BRILLIANT = "Brilliant"

    # Web3
    OPENSEA = "OpenSea"
    RARIBLE = "Rarible"
    FOUNDATION = "Foundation"
    SUPERRARE = "SuperRare"
    ZORA = "Zora"
    LENS_PROTOCOL = "Lens Protocol"
    FARCASTER = "Farcaster"
    DECENTRALAND = "Decentraland"
    CRYPTOVOXELS = "Cryptovoxels"
    SANDBOX = "The Sandbox"
    AXIE_INFINITY = "Axie Infinity"

    # Video conferencing
    ZOOM = "Zoom"
    TEAMS = "Microsoft Teams"
    GOOGLE_MEET = "Google Meet"
    SKYPE = "Skype"
    WEBEX = "Webex"
    WHEREBY = "Whereby"
    JITSI = "Jitsi"
    GOTOMEETING = "GoTo Meeting"
    BLUEJEANS = "BlueJeans"

    # Maps
    GOOGLE_MAPS = "Google Maps"
    APPLE_MAPS = "Apple Maps"
    WAZE = "Waze"
    OPENSTREETMAP = "OpenStreetMap"
    MAPBOX = "Mapbox"
    HERE_WEGO = "HERE WeGo"
    CITYMAPPER = "Citymapper"

    # Food delivery
    UBEREATS = "Uber Eats"
    DOORDASH = "DoorDash"
    GRUBHUB = "Grubhub"
    POSTMATES = "Postmates"
    INSTACART = "Instacart"
    DELIVEROO = "Deliveroo"
    JUSTEAT = "Just Eat"
    SEAMLESS = "Seamless"

    # Travel
    AIRBNB = "Airbnb"
    BOOKING = "Booking.com"
    EXPEDIA = "Expedia"
    TRIPADVISOR = "Tripadvisor"
    KAYAK = "Kayak"
    HOTELS = "Hotels.com"
    VRBO = "Vrbo"
    AGODA = "Agoda"

    # Productivity
    NOTION = "Notion"
    AIRTABLE = "Airtable"
    TRELLO = "Trello"
    MIRO = "Miro"
    CANVA = "Canva"
    LINKTREE = "Linktree"
    CARRD = "Carrd"
    ASANA = "Asana"
    MONDAY = "monday.com"
    CLICKUP = "ClickUp"
    JIRA = "Jira"
    WIKIPEDIA = "Wikipedia"

    # Subscription / creator
    ONLYFANS = "OnlyFans"
    PATREON = "Patreon"
    FANSLY = "Fansly"
    KOFI = "Ko-fi"
    BUYMEACOFFEE = "Buy Me a Coffee"
    GUMROAD = "Gumroad"
    SUBSCRIBESTAR = "SubscribeStar"

    UNKNOWN = "Unknown"


@unique
class PlatformCategory(str, Enum):
    """Semantic grouping of platforms by primary function."""

    VIDEO = "Video"
    AUDIO = "Audio"
    SOCIAL = "Social Media"
    MESSAGING = "Messaging"
    DEVELOPER = "Developer"
    ECOMMERCE = "E-commerce"
    CLOUD = "Cloud Storage"
    STREAMING = "Live Streaming"
    PRODUCTIVITY = "Productivity"
    MAPS = "Maps"
    NEWS = "News & Publishing"
    LEARNING = "E-Learning"
    WEB3 = "Web3 & Crypto"
    GAMING = "Gaming"
    FINANCIAL = "Financial"
    DATING = "Dating"
    FOOD = "Food Delivery"
    TRAVEL = "Travel & Booking"
    SUBSCRIPTION = "Subscription Platforms"
    ALTERNATIVE = "Alternative Tech"
    REGIONAL = "Regional"
    UNKNOWN = "Unknown"


@unique
class MediaType(str, Enum):
    """Coarse content kind derived from a file extension."""

    IMAGE = "Image"
    VIDEO = "Video"
    AUDIO = "Audio"
    DOCUMENT = "Document"
    ARCHIVE = "Archive"
    CODE = "Code"
    DATA = "Data"
    EXECUTABLE = "Executable"
    FONT = "Font"
    MODEL3D = "3D Model"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class URLAnalysis:
    """Everything known about a single URL string.

    Invalid input produces a record where only ``original_url`` is set and
    every other field keeps its default.
    """

    original_url: str
    is_valid: bool = False

    scheme: Optional[str] = None
    host: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None
    port: Optional[int] = None

    is_https: bool = False
    is_http: bool = False
    is_file_url: bool = False

    platform: Platform = Platform.UNKNOWN
    platform_category: PlatformCategory = PlatformCategory.UNKNOWN

    media_type: MediaType = MediaType.UNKNOWN
    file_extension: Optional[str] = None
    mime_type: Optional[str] = None
    file_type_description: Optional[str] = None

    extracted_ids: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extracted_ids", MappingProxyType(dict(self.extracted_ids)))

    @property
    def summary(self) -> str:
        """Human-readable one-line description of the present signals."""
        parts = []

        if self.platform is not Platform.UNKNOWN:
            parts.append(self.platform.value)
        if self.media_type is not MediaType.UNKNOWN:
            parts.append(self.media_type.value)
        if self.file_extension:
            parts.append(f".{self.file_extension}")
        if self.is_https:
            parts.append("Secure")
        if self.extracted_ids:
            parts.append(f"{len(self.extracted_ids)} ID(s)")

        return SUMMARY_SEPARATOR.join(parts) if parts else "Invalid URL"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain JSON-compatible types."""
        return {
            "original_url": self.original_url,
            "is_valid": self.is_valid,
            "scheme": self.scheme,
            "host": self.host,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
            "port": self.port,
            "is_https": self.is_https,
            "is_http": self.is_http,
            "is_file_url": self.is_file_url,
            "platform": self.platform.value,
            "platform_category": self.platform_category.value,
            "media_type": self.media_type.value,
            "file_extension": self.file_extension,
            "mime_type": self.mime_type,
            "file_type_description": self.file_type_description,
            "extracted_ids": dict(self.extracted_ids),
            "summary": self.summary,
        }


__all__ = ["Platform", "PlatformCategory", "MediaType", "URLAnalysis", "SUMMARY_SEPARATOR"]
