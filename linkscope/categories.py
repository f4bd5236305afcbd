"""Platform to category mapping."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping

from .models import Platform, PlatformCategory


P = Platform

CATEGORY_MEMBERS: Mapping[PlatformCategory, FrozenSet[Platform]] = MappingProxyType(
    {
        PlatformCategory.VIDEO: frozenset(
            {
                P.YOUTUBE, P.YOUTUBE_SHORTS, P.VIMEO, P.DAILYMOTION, P.TWITCH, P.KICK, P.VEOH,
                P.METACAFE, P.YOUTUBE_STUDIO, P.YOUTUBE_GAMING,
                # Short-form
                P.TIKTOK, P.INSTAGRAM_REELS, P.DOUYIN, P.KUAISHOU, P.LIKEE, P.TRILLER, P.BYTE,
                P.CLASH,
            }
        ),
        PlatformCategory.AUDIO: frozenset(
            {
                P.SPOTIFY, P.APPLE_MUSIC, P.APPLE_PODCASTS, P.SOUNDCLOUD, P.BANDCAMP, P.DEEZER,
                P.TIDAL, P.AMAZON_MUSIC, P.YOUTUBE_MUSIC, P.PANDORA, P.AUDIOMACK, P.QOBUZ,
                P.MIXCLOUD, P.BEATPORT, P.NAPSTER, P.IHEARTRADIO, P.TUNEIN, P.ANGHAMI, P.GAANA,
                P.JIOSAAVN, P.LASTFM, P.GENIUS,
                # Podcasts
                P.ANCHOR, P.POCKET_CASTS, P.OVERCAST, P.CASTBOX, P.GOOGLE_PODCASTS, P.STITCHER,
                P.PODBEAN, P.BUZZSPROUT, P.PODCASTS_SPOTIFY, P.PODCAST_ADDICT, P.CASTRO,
            }
        ),
        PlatformCategory.ALTERNATIVE: frozenset(
            {
                P.RUMBLE, P.BITCHUTE, P.ODYSEE, P.PEERTUBE, P.DTUBE, P.BRIGHTEON, P.BANNED,
                P.ROKFIN, P.FLOATPLANE, P.NEBULA, P.LBRY,
                # Social
                P.MASTODON, P.BLUESKY, P.TRUTH_SOCIAL, P.GAB, P.PARLER, P.MEWE, P.GETTR, P.MINDS,
                P.LOCALS, P.DIASPORA,
            }
        ),
        PlatformCategory.SOCIAL: frozenset(
            {
                P.FACEBOOK, P.TWITTER, P.INSTAGRAM, P.LINKEDIN, P.REDDIT, P.PINTEREST, P.TUMBLR,
                P.THREADS, P.SNAPCHAT, P.VERO, P.ELLO,
            }
        ),
        PlatformCategory.REGIONAL: frozenset(
            {
                P.WEIBO, P.WECHAT, P.QQ, P.XIAOHONGSHU, P.BILIBILI, P.YOUKU, P.NICONICO,
                P.KAKAOTALK, P.LINE, P.ZALO, P.VK,
            }
        ),
        PlatformCategory.MESSAGING: frozenset(
            {
                P.WHATSAPP, P.TELEGRAM, P.DISCORD, P.SLACK, P.SIGNAL, P.MESSENGER, P.VIBER,
                P.ELEMENT, P.MATRIX, P.THREEMA, P.WIRE, P.SESSION, P.KEYBASE,
            }
        ),
        PlatformCategory.STREAMING: frozenset(
            {
                P.TWITCH_LIVE, P.FACEBOOK_GAMING, P.DLIVE, P.CAFFEINE, P.TROVO, P.PICARTO,
                P.YOUNOW, P.BIGO_LIVE, P.STREAMYARD, P.STREAMLABS, P.RESTREAM, P.OBS_LIVE,
                # Video conferencing
                P.ZOOM, P.TEAMS, P.GOOGLE_MEET, P.SKYPE, P.WEBEX, P.WHEREBY, P.JITSI,
                P.GOTOMEETING, P.BLUEJEANS,
            }
        ),
        PlatformCategory.DEVELOPER: frozenset(
            {
                P.GITHUB, P.GITLAB, P.BITBUCKET, P.STACKOVERFLOW, P.CODEPEN, P.CODESANDBOX,
                P.REPLIT, P.FIGMA, P.DRIBBBLE, P.BEHANCE, P.ANGELLIST, P.PRODUCTHUNT, P.POLYWORK,
                P.WELLFOUND, P.GLITCH, P.KAGGLE, P.VERCEL, P.NETLIFY,
            }
        ),
        PlatformCategory.ECOMMERCE: frozenset(
            {
                P.AMAZON, P.EBAY, P.ETSY, P.SHOPIFY, P.ALIBABA, P.ALIEXPRESS, P.MERCARI,
                P.POSHMARK, P.DEPOP, P.WALMART, P.TARGET, P.BESTBUY, P.WISH, P.SHEIN, P.WAYFAIR,
            }
        ),
        PlatformCategory.GAMING: frozenset(
            {
                P.STEAM, P.EPIC_GAMES, P.BATTLENET, P.ORIGIN, P.UPLAY, P.GOG, P.ITCH_IO, P.ROBLOX,
                P.MINECRAFT, P.FORTNITE, P.LEAGUE_OF_LEGENDS, P.VALORANT, P.XBOX, P.PLAYSTATION,
                P.NINTENDO,
            }
        ),
        PlatformCategory.FINANCIAL: frozenset(
            {
                P.PAYPAL, P.VENMO, P.CASHAPP, P.ZELLE, P.STRIPE, P.SQUARE, P.COINBASE, P.BINANCE,
                P.KRAKEN, P.ROBINHOOD, P.ETORO, P.REVOLUT, P.WISE, P.KLARNA, P.AFTERPAY,
                P.AFFIRM, P.CHIME, P.METAMASK, P.CRYPTO_DOT_COM, P.WEBULL, P.ALIPAY, P.PAYTM,
            }
        ),
        PlatformCategory.DATING: frozenset(
            {
                P.TINDER, P.BUMBLE, P.HINGE, P.MATCH, P.OKCUPID, P.PLENTYOFFISH, P.EHARMONY,
                P.COFFEE_MEETS_BAGEL, P.HAPPN, P.BADOO, P.GRINDR, P.HER, P.FEELD,
            }
        ),
        PlatformCategory.CLOUD: frozenset(
            {
                P.DROPBOX, P.GOOGLE_DRIVE, P.ONEDRIVE, P.BOX, P.ICLOUD, P.MEGA, P.PCLOUD, P.SYNC,
                P.MEDIAFIRE, P.WETRANSFER,
            }
        ),
        PlatformCategory.NEWS: frozenset(
            {
                P.MEDIUM, P.SUBSTACK, P.WORDPRESS, P.BLOGGER, P.GHOST, P.MIRROR, P.REVUE,
                P.CONVERTKIT, P.BEEHIIV, P.HASHNODE, P.DEVTO,
            }
        ),
        PlatformCategory.LEARNING: frozenset(
            {
                P.UDEMY, P.COURSERA, P.EDX, P.SKILLSHARE, P.TEACHABLE, P.THINKIFIC, P.KAJABI,
                P.LINKEDIN_LEARNING, P.KHAN_ACADEMY, P.UDACITY, P.PLURALSIGHT, P.MASTERCLASS,
                P.BRILLIANT,
            }
        ),
        PlatformCategory.WEB3: frozenset(
            {
                P.OPENSEA, P.RARIBLE, P.FOUNDATION, P.SUPERRARE, P.ZORA, P.LENS_PROTOCOL,
                P.FARCASTER, P.DECENTRALAND, P.CRYPTOVOXELS, P.SANDBOX, P.AXIE_INFINITY,
            }
        ),
        PlatformCategory.MAPS: frozenset(
            {
                P.GOOGLE_MAPS, P.APPLE_MAPS, P.WAZE, P.OPENSTREETMAP, P.MAPBOX, P.HERE_WEGO,
                P.CITYMAPPER,
            }
        ),
        PlatformCategory.FOOD: frozenset(
            {
                P.UBEREATS, P.DOORDASH, P.GRUBHUB, P.POSTMATES, P.INSTACART, P.DELIVEROO,
                P.JUSTEAT, P.SEAMLESS,
            }
        ),
        PlatformCategory.TRAVEL: frozenset(
            {
                P.AIRBNB, P.BOOKING, P.EXPEDIA, P.TRIPADVISOR, P.KAYAK, P.HOTELS, P.VRBO, P.AGODA,
            }
        ),
        PlatformCategory.PRODUCTIVITY: frozenset(
            {
                P.NOTION, P.AIRTABLE, P.TRELLO, P.MIRO, P.CANVA, P.WIKIPEDIA, P.LINKTREE, P.CARRD,
                P.ASANA, P.MONDAY, P.CLICKUP, P.JIRA,
            }
        ),
        PlatformCategory.SUBSCRIPTION: frozenset(
            {
                P.ONLYFANS, P.PATREON, P.FANSLY, P.KOFI, P.BUYMEACOFFEE, P.GUMROAD,
                P.SUBSCRIBESTAR,
            }
        ),
    }
)


def _invert(members: Mapping[PlatformCategory, FrozenSet[Platform]]) -> Dict[Platform, PlatformCategory]:
    mapping: Dict[Platform, PlatformCategory] = {}
    for category, platforms in members.items():
        for platform in platforms:
            if platform in mapping:
                raise ValueError(
                    f"{platform.name} is listed under both {mapping[platform].name} and {category.name}"
                )
            mapping[platform] = category
    return mapping


PLATFORM_CATEGORIES: Mapping[Platform, PlatformCategory] = MappingProxyType(_invert(CATEGORY_MEMBERS))


def category_for(platform: Platform) -> PlatformCategory:
    """Return the category of a platform. ``UNKNOWN`` maps to ``UNKNOWN``."""
    return PLATFORM_CATEGORIES.get(platform, PlatformCategory.UNKNOWN)


def platforms_in(category: PlatformCategory) -> FrozenSet[Platform]:
    """Return every platform filed under a category."""
    return CATEGORY_MEMBERS.get(category, frozenset())


__all__ = ["CATEGORY_MEMBERS", "PLATFORM_CATEGORIES", "category_for", "platforms_in"]
