"""Static host pattern tables used by the platform detector.

Three tiers are consulted in a fixed order:

1. ``SPECIAL_SUBDOMAIN_RULES``: exact clean-host matches for sub-services that
   live under another platform's domain (``music.youtube.com``).
2. ``PLATFORM_PATTERNS``: host equals a domain or ends with ``.`` + domain.
   Platforms in ``SKIP_PLATFORMS`` are left out of this tier.
3. ``CUSTOM_SUBDOMAIN_RULES``: substring containment, for platforms that hand
   out per-customer subdomains.

All tables are immutable and built once at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from .models import Platform


def _freeze(table: Dict[Platform, Iterable[str]]) -> Mapping[Platform, FrozenSet[str]]:
    return MappingProxyType({platform: frozenset(domains) for platform, domains in table.items()})


PLATFORM_PATTERNS: Mapping[Platform, FrozenSet[str]] = _freeze(
    {
        # Video
        Platform.YOUTUBE: ["youtube.com", "m.youtube.com", "youtu.be", "youtube-nocookie.com"],
        Platform.YOUTUBE_MUSIC: ["music.youtube.com"],
        Platform.YOUTUBE_STUDIO: ["studio.youtube.com"],
        Platform.VIMEO: ["vimeo.com", "player.vimeo.com"],
        Platform.DAILYMOTION: ["dailymotion.com", "dai.ly"],
        Platform.TWITCH: ["twitch.tv", "clips.twitch.tv", "m.twitch.tv"],
        Platform.KICK: ["kick.com"],
        Platform.RUMBLE: ["rumble.com"],
        Platform.BITCHUTE: ["bitchute.com"],
        Platform.ODYSEE: ["odysee.com"],
        Platform.LBRY: ["lbry.tv", "lbry.com"],
        Platform.PEERTUBE: ["peertube.tv", "framatube.org", "tilvids.com"],
        Platform.DTUBE: ["d.tube"],
        Platform.VEOH: ["veoh.com"],
        Platform.METACAFE: ["metacafe.com"],
        Platform.BRIGHTEON: ["brighteon.com"],
        Platform.BANNED: ["banned.video"],
        Platform.ROKFIN: ["rokfin.com"],
        Platform.FLOATPLANE: ["floatplane.com"],
        Platform.NEBULA: ["nebula.tv", "nebula.app"],
        # Short-form video
        Platform.TIKTOK: ["tiktok.com", "vm.tiktok.com", "m.tiktok.com", "vt.tiktok.com"],
        Platform.INSTAGRAM: ["instagram.com", "instagr.am", "ig.me"],
        Platform.SNAPCHAT: ["snapchat.com", "snap.com", "snapchat.co"],
        Platform.DOUYIN: ["douyin.com"],
        Platform.KUAISHOU: ["kuaishou.com"],
        Platform.LIKEE: ["likee.video", "like.video"],
        Platform.TRILLER: ["triller.co", "triller.com"],
        Platform.BYTE: ["byte.co"],
        Platform.CLASH: ["clash.co", "clash.me"],
        # Audio / music
        Platform.SPOTIFY: ["spotify.com", "open.spotify.com", "play.spotify.com", "spotify.link"],
        Platform.APPLE_MUSIC: ["music.apple.com", "itunes.apple.com"],
        Platform.APPLE_PODCASTS: ["podcasts.apple.com"],
        Platform.SOUNDCLOUD: ["soundcloud.com", "on.soundcloud.com", "m.soundcloud.com"],
        Platform.BANDCAMP: ["bandcamp.com"],
        Platform.DEEZER: ["deezer.com", "deezer.page.link", "dzr.fm"],
        Platform.TIDAL: ["tidal.com", "listen.tidal.com"],
        Platform.AMAZON_MUSIC: ["music.amazon.com", "music.amazon.co.uk", "music.amazon.de"],
        Platform.PANDORA: ["pandora.com", "pandora.app.link"],
        Platform.AUDIOMACK: ["audiomack.com"],
        Platform.QOBUZ: ["qobuz.com", "play.qobuz.com", "open.qobuz.com"],
        Platform.MIXCLOUD: ["mixcloud.com"],
        Platform.BEATPORT: ["beatport.com"],
        Platform.NAPSTER: ["napster.com"],
        Platform.IHEARTRADIO: ["iheart.com", "iheartradio.com"],
        Platform.TUNEIN: ["tunein.com"],
        Platform.ANGHAMI: ["anghami.com", "play.anghami.com"],
        Platform.GAANA: ["gaana.com"],
        Platform.JIOSAAVN: ["jiosaavn.com", "saavn.com"],
        Platform.LASTFM: ["last.fm", "lastfm.com"],
        Platform.GENIUS: ["genius.com"],
        # Podcasts
        Platform.ANCHOR: ["anchor.fm"],
        Platform.PODCASTS_SPOTIFY: ["podcasters.spotify.com"],
        Platform.POCKET_CASTS: ["pocketcasts.com", "pca.st"],
        Platform.OVERCAST: ["overcast.fm"],
        Platform.CASTBOX: ["castbox.fm"],
        Platform.GOOGLE_PODCASTS: ["podcasts.google.com"],
        Platform.STITCHER: ["stitcher.com"],
        Platform.PODBEAN: ["podbean.com"],
        Platform.BUZZSPROUT: ["buzzsprout.com"],
        Platform.PODCAST_ADDICT: ["podcastaddict.com"],
        Platform.CASTRO: ["castro.fm"],
        # Social
        Platform.FACEBOOK: [
            "facebook.com", "m.facebook.com", "fb.com", "fb.me", "fb.watch", "business.facebook.com",
        ],
        Platform.TWITTER: ["twitter.com", "x.com", "t.co", "mobile.twitter.com", "mobile.x.com"],
        Platform.LINKEDIN: ["linkedin.com", "lnkd.in"],
        Platform.REDDIT: ["reddit.com", "redd.it", "old.reddit.com", "np.reddit.com", "i.reddit.com"],
        Platform.PINTEREST: ["pinterest.com", "pin.it", "pinterest.co.uk", "pinterest.ca"],
        Platform.TUMBLR: ["tumblr.com", "tmblr.co"],
        Platform.MASTODON: ["mastodon.social", "mastodon.online", "mstdn.social", "fosstodon.org", "mas.to"],
        Platform.THREADS: ["threads.net"],
        Platform.BLUESKY: ["bsky.app", "bsky.social", "blueskyweb.xyz"],
        Platform.TRUTH_SOCIAL: ["truthsocial.com", "truthsocial.tv"],
        Platform.GAB: ["gab.com", "gab.ai"],
        Platform.PARLER: ["parler.com"],
        Platform.MEWE: ["mewe.com"],
        Platform.GETTR: ["gettr.com"],
        Platform.MINDS: ["minds.com"],
        Platform.LOCALS: ["locals.com"],
        Platform.VERO: ["vero.co"],
        Platform.ELLO: ["ello.co"],
        Platform.DIASPORA: ["diasporafoundation.org", "joindiaspora.com"],
        # Regional
        Platform.WEIBO: ["weibo.com", "weibo.cn", "s.weibo.com"],
        Platform.WECHAT: ["wechat.com", "weixin.qq.com"],
        Platform.QQ: ["qq.com", "im.qq.com"],
        Platform.XIAOHONGSHU: ["xiaohongshu.com", "xhslink.com"],
        Platform.BILIBILI: ["bilibili.com", "b23.tv", "bilibili.tv"],
        Platform.YOUKU: ["youku.com", "v.youku.com"],
        Platform.NICONICO: ["nicovideo.jp", "nico.ms"],
        Platform.KAKAOTALK: ["kakao.com", "kakaocorp.com"],
        Platform.LINE: ["line.me"],
        Platform.VIBER: ["viber.com"],
        Platform.ZALO: ["zalo.me"],
        Platform.VK: ["vk.com", "vk.ru"],
        # Messaging
        Platform.WHATSAPP: [
            "whatsapp.com", "wa.me", "wa.link", "api.whatsapp.com", "web.whatsapp.com", "chat.whatsapp.com",
        ],
        Platform.TELEGRAM: ["telegram.org", "t.me", "telegram.me", "telegram.dog"],
        Platform.DISCORD: ["discord.com", "discord.gg", "discordapp.com", "discord.co", "discord.new"],
        Platform.SLACK: ["slack.com", "app.slack.com"],
        Platform.SIGNAL: ["signal.org", "signal.me"],
        Platform.MESSENGER: ["messenger.com", "m.me"],
        Platform.ELEMENT: ["element.io", "app.element.io"],
        Platform.MATRIX: ["matrix.org", "matrix.to"],
        Platform.THREEMA: ["threema.ch"],
        Platform.WIRE: ["wire.com"],
        Platform.SESSION: ["getsession.org"],
        Platform.KEYBASE: ["keybase.io"],
        # Live streaming
        Platform.FACEBOOK_GAMING: ["fb.gg", "gaming.fb.com"],
        Platform.YOUTUBE_GAMING: ["gaming.youtube.com"],
        Platform.DLIVE: ["dlive.tv"],
        Platform.CAFFEINE: ["caffeine.tv"],
        Platform.TROVO: ["trovo.live"],
        Platform.PICARTO: ["picarto.tv"],
        Platform.YOUNOW: ["younow.com"],
        Platform.BIGO_LIVE: ["bigo.tv"],
        Platform.STREAMYARD: ["streamyard.com"],
        Platform.STREAMLABS: ["streamlabs.com"],
        Platform.RESTREAM: ["restream.io"],
        Platform.OBS_LIVE: ["obs.live"],
        # Developer
        Platform.GITHUB: ["github.com", "gist.github.com", "raw.githubusercontent.com", "github.io"],
        Platform.GITLAB: ["gitlab.com"],
        Platform.BITBUCKET: ["bitbucket.org", "bitbucket.com"],
        Platform.STACKOVERFLOW: ["stackoverflow.com", "stackexchange.com"],
        Platform.CODEPEN: ["codepen.io", "cdpn.io"],
        Platform.CODESANDBOX: ["codesandbox.io"],
        Platform.REPLIT: ["replit.com", "repl.it", "repl.co"],
        Platform.FIGMA: ["figma.com"],
        Platform.DRIBBBLE: ["dribbble.com"],
        Platform.BEHANCE: ["behance.net"],
        Platform.ANGELLIST: ["angel.co", "angellist.com"],
        Platform.PRODUCTHUNT: ["producthunt.com"],
        Platform.POLYWORK: ["polywork.com"],
        Platform.WELLFOUND: ["wellfound.com"],
        Platform.GLITCH: ["glitch.com", "glitch.me"],
        Platform.KAGGLE: ["kaggle.com"],
        Platform.VERCEL: ["vercel.com", "vercel.app"],
        Platform.NETLIFY: ["netlify.com", "netlify.app"],
        # E-commerce
        Platform.AMAZON: [
            "amazon.com", "amazon.co.uk", "amazon.de", "amazon.fr", "amazon.it", "amazon.es",
            "amazon.ca", "amazon.in", "amazon.co.jp", "amzn.to", "amzn.eu",
        ],
        Platform.EBAY: [
            "ebay.com", "ebay.co.uk", "ebay.de", "ebay.fr", "ebay.it", "ebay.es", "ebay.ca",
            "ebay.com.au", "ebay.to",
        ],
        Platform.ETSY: ["etsy.com"],
        Platform.SHOPIFY: ["myshopify.com", "shopify.com", "shop.app"],
        Platform.ALIBABA: ["alibaba.com", "1688.com"],
        Platform.ALIEXPRESS: ["aliexpress.com", "aliexpress.ru"],
        Platform.MERCARI: ["mercari.com", "mercari.jp"],
        Platform.POSHMARK: ["poshmark.com", "poshmark.ca"],
        Platform.DEPOP: ["depop.com"],
        Platform.WALMART: ["walmart.com"],
        Platform.TARGET: ["target.com"],
        Platform.BESTBUY: ["bestbuy.com"],
        Platform.WISH: ["wish.com"],
        Platform.SHEIN: ["shein.com"],
        Platform.WAYFAIR: ["wayfair.com"],
        # Gaming
        Platform.STEAM: ["store.steampowered.com", "steamcommunity.com", "steam.com"],
        Platform.EPIC_GAMES: ["epicgames.com", "store.epicgames.com"],
        Platform.BATTLENET: ["battle.net", "blizzard.com"],
        Platform.ORIGIN: ["origin.com", "ea.com"],
        Platform.UPLAY: ["uplay.com", "ubisoft.com"],
        Platform.GOG: ["gog.com"],
        Platform.ITCH_IO: ["itch.io"],
        Platform.ROBLOX: ["roblox.com"],
        Platform.MINECRAFT: ["minecraft.net"],
        Platform.FORTNITE: ["fortnite.com"],
        Platform.LEAGUE_OF_LEGENDS: ["leagueoflegends.com"],
        Platform.VALORANT: ["playvalorant.com"],
        Platform.XBOX: ["xbox.com"],
        Platform.PLAYSTATION: ["playstation.com"],
        Platform.NINTENDO: ["nintendo.com"],
        # Financial
        Platform.PAYPAL: ["paypal.com", "paypal.me"],
        Platform.VENMO: ["venmo.com"],
        Platform.CASHAPP: ["cash.app", "cash.me"],
        Platform.ZELLE: ["zellepay.com"],
        Platform.STRIPE: ["stripe.com"],
        Platform.SQUARE: ["square.com", "squareup.com"],
        Platform.ALIPAY: ["alipay.com", "intl.alipay.com"],
        Platform.PAYTM: ["paytm.com"],
        Platform.KLARNA: ["klarna.com"],
        Platform.AFTERPAY: ["afterpay.com"],
        Platform.AFFIRM: ["affirm.com"],
        Platform.CHIME: ["chime.com"],
        Platform.REVOLUT: ["revolut.com"],
        Platform.WISE: ["wise.com", "transferwise.com"],
        Platform.ROBINHOOD: ["robinhood.com"],
        Platform.ETORO: ["etoro.com"],
        Platform.WEBULL: ["webull.com"],
        Platform.COINBASE: ["coinbase.com"],
        Platform.BINANCE: ["binance.com", "binance.us"],
        Platform.KRAKEN: ["kraken.com"],
        Platform.METAMASK: ["metamask.io"],
        Platform.CRYPTO_DOT_COM: ["crypto.com"],
        # Dating
        Platform.TINDER: ["tinder.com", "gotinder.com"],
        Platform.BUMBLE: ["bumble.com"],
        Platform.HINGE: ["hinge.co"],
        Platform.MATCH: ["match.com"],
        Platform.OKCUPID: ["okcupid.com"],
        Platform.PLENTYOFFISH: ["pof.com", "plentyoffish.com"],
        Platform.EHARMONY: ["eharmony.com"],
        Platform.COFFEE_MEETS_BAGEL: ["coffeemeetsbagel.com"],
        Platform.HAPPN: ["happn.com"],
        Platform.BADOO: ["badoo.com"],
        Platform.GRINDR: ["grindr.com"],
        Platform.HER: ["weareher.com"],
        Platform.FEELD: ["feeld.co"],
        # Cloud storage
        Platform.DROPBOX: ["dropbox.com", "db.tt", "dropboxusercontent.com"],
        Platform.GOOGLE_DRIVE: ["drive.google.com", "docs.google.com", "sheets.google.com", "slides.google.com"],
        Platform.ONEDRIVE: ["onedrive.com", "1drv.ms", "onedrive.live.com"],
        Platform.BOX: ["box.com", "app.box.com"],
        Platform.ICLOUD: ["icloud.com"],
        Platform.MEGA: ["mega.nz", "mega.io", "mega.co.nz"],
        Platform.PCLOUD: ["pcloud.com", "pc.cd"],
        Platform.SYNC: ["sync.com"],
        Platform.MEDIAFIRE: ["mediafire.com"],
        Platform.WETRANSFER: ["wetransfer.com", "we.tl"],
        # News / publishing
        Platform.MEDIUM: ["medium.com", "link.medium.com"],
        Platform.SUBSTACK: ["substack.com"],
        Platform.WORDPRESS: ["wordpress.com", "wp.com"],
        Platform.BLOGGER: ["blogger.com", "blogspot.com"],
        Platform.GHOST: ["ghost.io", "ghost.org"],
        Platform.MIRROR: ["mirror.xyz"],
        Platform.REVUE: ["getrevue.co"],
        Platform.CONVERTKIT: ["convertkit.com"],
        Platform.BEEHIIV: ["beehiiv.com"],
        Platform.HASHNODE: ["hashnode.com", "hashnode.dev"],
        Platform.DEVTO: ["dev.to"],
        # E-learning
        Platform.UDEMY: ["udemy.com"],
        Platform.COURSERA: ["coursera.org"],
        Platform.EDX: ["edx.org"],
        Platform.SKILLSHARE: ["skillshare.com"],
        Platform.TEACHABLE: ["teachable.com"],
        Platform.THINKIFIC: ["thinkific.com"],
        Platform.KAJABI: ["kajabi.com"],
        Platform.LINKEDIN_LEARNING: ["learning.linkedin.com"],
        Platform.KHAN_ACADEMY: ["khanacademy.org"],
        Platform.UDACITY: ["udacity.com"],
        Platform.PLURALSIGHT: ["pluralsight.com"],
        Platform.MASTERCLASS: ["masterclass.com"],
        Platform.BRILLIANT: ["brilliant.org"],
        # Web3
        Platform.OPENSEA: ["opensea.io"],
        Platform.RARIBLE: ["rarible.com"],
        Platform.FOUNDATION: ["foundation.app"],
        Platform.SUPERRARE: ["superrare.com"],
        Platform.ZORA: ["zora.co"],
        Platform.LENS_PROTOCOL: ["lens.xyz", "lens.dev"],
        Platform.FARCASTER: ["farcaster.xyz", "warpcast.com"],
        Platform.DECENTRALAND: ["decentraland.org"],
        Platform.CRYPTOVOXELS: ["cryptovoxels.com"],
        Platform.SANDBOX: ["sandbox.game"],
        Platform.AXIE_INFINITY: ["axieinfinity.com"],
        # Video conferencing
        Platform.ZOOM: ["zoom.us", "zoom.com", "zoomgov.com"],
        Platform.TEAMS: ["teams.microsoft.com", "teams.live.com"],
        Platform.GOOGLE_MEET: ["meet.google.com"],
        Platform.SKYPE: ["skype.com", "skype.co"],
        Platform.WEBEX: ["webex.com"],
        Platform.WHEREBY: ["whereby.com"],
        Platform.JITSI: ["meet.jit.si", "jitsi.org"],
        Platform.GOTOMEETING: ["gotomeeting.com"],
        Platform.BLUEJEANS: ["bluejeans.com"],
        # Maps
        Platform.GOOGLE_MAPS: ["maps.google.com"],
        Platform.APPLE_MAPS: ["maps.apple.com"],
        Platform.WAZE: ["waze.com"],
        Platform.OPENSTREETMAP: ["openstreetmap.org"],
        Platform.MAPBOX: ["mapbox.com"],
        Platform.HERE_WEGO: ["here.com", "wego.here.com"],
        Platform.CITYMAPPER: ["citymapper.com"],
        # Food delivery
        Platform.UBEREATS: ["ubereats.com"],
        Platform.DOORDASH: ["doordash.com"],
        Platform.GRUBHUB: ["grubhub.com"],
        Platform.POSTMATES: ["postmates.com"],
        Platform.INSTACART: ["instacart.com"],
        Platform.DELIVEROO: ["deliveroo.com", "deliveroo.co.uk"],
        Platform.JUSTEAT: ["just-eat.com", "justeat.com"],
        Platform.SEAMLESS: ["seamless.com"],
        # Travel
        Platform.AIRBNB: ["airbnb.com"],
        Platform.BOOKING: ["booking.com"],
        Platform.EXPEDIA: ["expedia.com"],
        Platform.TRIPADVISOR: ["tripadvisor.com"],
        Platform.KAYAK: ["kayak.com"],
        Platform.HOTELS: ["hotels.com"],
        Platform.VRBO: ["vrbo.com"],
        Platform.AGODA: ["agoda.com"],
        # Productivity
        Platform.NOTION: ["notion.so", "notion.site"],
        Platform.AIRTABLE: ["airtable.com"],
        Platform.TRELLO: ["trello.com"],
        Platform.MIRO: ["miro.com"],
        Platform.CANVA: ["canva.com", "canva.link"],
        Platform.LINKTREE: ["linktr.ee", "linktree.com"],
        Platform.CARRD: ["carrd.co"],
        Platform.ASANA: ["asana.com"],
        Platform.MONDAY: ["monday.com"],
        Platform.CLICKUP: ["clickup.com"],
        Platform.JIRA: ["atlassian.net"],
        # Subscription / creator
        Platform.ONLYFANS: ["onlyfans.com"],
        Platform.PATREON: ["patreon.com"],
        Platform.FANSLY: ["fansly.com"],
        Platform.KOFI: ["ko-fi.com"],
        Platform.BUYMEACOFFEE: ["buymeacoffee.com"],
        Platform.GUMROAD: ["gumroad.com"],
        Platform.SUBSCRIBESTAR: ["subscribestar.com", "subscribestar.adult"],
        # Other
        Platform.WIKIPEDIA: ["wikipedia.org"],
    }
)


SPECIAL_SUBDOMAIN_RULES: Tuple[Tuple[str, Platform], ...] = (
    # YouTube family
    ("music.youtube.com", Platform.YOUTUBE_MUSIC),
    ("studio.youtube.com", Platform.YOUTUBE_STUDIO),
    ("gaming.youtube.com", Platform.YOUTUBE_GAMING),
    # Amazon
    ("music.amazon.com", Platform.AMAZON_MUSIC),
    ("music.amazon.co.uk", Platform.AMAZON_MUSIC),
    ("music.amazon.de", Platform.AMAZON_MUSIC),
    ("music.amazon.fr", Platform.AMAZON_MUSIC),
    ("music.amazon.it", Platform.AMAZON_MUSIC),
    ("music.amazon.es", Platform.AMAZON_MUSIC),
    ("music.amazon.ca", Platform.AMAZON_MUSIC),
    ("music.amazon.co.jp", Platform.AMAZON_MUSIC),
    # Learning
    ("learning.linkedin.com", Platform.LINKEDIN_LEARNING),
    # Facebook
    ("business.facebook.com", Platform.FACEBOOK),
    ("developers.facebook.com", Platform.FACEBOOK),
    ("gaming.fb.com", Platform.FACEBOOK_GAMING),
    ("fb.gg", Platform.FACEBOOK_GAMING),
    # Google
    ("meet.google.com", Platform.GOOGLE_MEET),
    ("drive.google.com", Platform.GOOGLE_DRIVE),
    ("docs.google.com", Platform.GOOGLE_DRIVE),
    ("sheets.google.com", Platform.GOOGLE_DRIVE),
    ("slides.google.com", Platform.GOOGLE_DRIVE),
    ("forms.google.com", Platform.GOOGLE_DRIVE),
    ("sites.google.com", Platform.GOOGLE_DRIVE),
    ("maps.google.com", Platform.GOOGLE_MAPS),
    ("podcasts.google.com", Platform.GOOGLE_PODCASTS),
    # Microsoft
    ("teams.microsoft.com", Platform.TEAMS),
    ("teams.live.com", Platform.TEAMS),
    ("onedrive.live.com", Platform.ONEDRIVE),
    # Apple
    ("podcasts.apple.com", Platform.APPLE_PODCASTS),
    ("music.apple.com", Platform.APPLE_MUSIC),
    ("maps.apple.com", Platform.APPLE_MAPS),
    ("itunes.apple.com", Platform.APPLE_MUSIC),
    # Spotify
    ("open.spotify.com", Platform.SPOTIFY),
    ("play.spotify.com", Platform.SPOTIFY),
    ("podcasters.spotify.com", Platform.PODCASTS_SPOTIFY),
    # Twitch
    ("clips.twitch.tv", Platform.TWITCH),
    ("m.twitch.tv", Platform.TWITCH),
    ("player.twitch.tv", Platform.TWITCH),
    # GitHub
    ("gist.github.com", Platform.GITHUB),
    ("raw.githubusercontent.com", Platform.GITHUB),
    # WeChat / QQ
    ("weixin.qq.com", Platform.WECHAT),
    ("wechat.com", Platform.WECHAT),
    ("im.qq.com", Platform.QQ),
    # Reddit
    ("old.reddit.com", Platform.REDDIT),
    ("np.reddit.com", Platform.REDDIT),
    ("i.reddit.com", Platform.REDDIT),
    # SoundCloud
    ("on.soundcloud.com", Platform.SOUNDCLOUD),
    ("m.soundcloud.com", Platform.SOUNDCLOUD),
    # Other
    ("player.vimeo.com", Platform.VIMEO),
    ("app.slack.com", Platform.SLACK),
    ("web.whatsapp.com", Platform.WHATSAPP),
    ("chat.whatsapp.com", Platform.WHATSAPP),
    ("api.whatsapp.com", Platform.WHATSAPP),
    ("app.element.io", Platform.ELEMENT),
    ("warpcast.com", Platform.FARCASTER),
    ("intl.alipay.com", Platform.ALIPAY),
    ("binance.us", Platform.BINANCE),
    ("app.box.com", Platform.BOX),
)


SKIP_PLATFORMS: FrozenSet[Platform] = frozenset(
    {
        Platform.YOUTUBE_MUSIC,
        Platform.YOUTUBE_STUDIO,
        Platform.YOUTUBE_GAMING,
        Platform.LINKEDIN_LEARNING,
        Platform.WECHAT,
        Platform.AMAZON_MUSIC,
        Platform.PODCASTS_SPOTIFY,
        Platform.FACEBOOK_GAMING,
        Platform.GOOGLE_MEET,
        Platform.GOOGLE_DRIVE,
        Platform.GOOGLE_MAPS,
        Platform.GOOGLE_PODCASTS,
        Platform.TEAMS,
        Platform.APPLE_PODCASTS,
        Platform.APPLE_MUSIC,
        Platform.APPLE_MAPS,
    }
)


CUSTOM_SUBDOMAIN_RULES: Tuple[Tuple[Platform, str], ...] = (
    (Platform.BANDCAMP, "bandcamp.com"),
    (Platform.SHOPIFY, ".myshopify.com"),
    (Platform.PODBEAN, ".podbean.com"),
    (Platform.BUZZSPROUT, ".buzzsprout.com"),
    (Platform.SUBSTACK, ".substack.com"),
    (Platform.MEDIUM, ".medium.com"),
    (Platform.WORDPRESS, ".wordpress.com"),
    (Platform.BLOGGER, ".blogspot.com"),
    (Platform.GHOST, ".ghost.io"),
    (Platform.NOTION, ".notion.site"),
    (Platform.JIRA, ".atlassian.net"),
    (Platform.CARRD, ".carrd.co"),
    (Platform.HASHNODE, ".hashnode.dev"),
    (Platform.VERCEL, ".vercel.app"),
    (Platform.NETLIFY, ".netlify.app"),
    (Platform.GITHUB, ".github.io"),
    (Platform.GITLAB, ".gitlab.io"),
)


def generic_tier_patterns() -> Dict[Platform, FrozenSet[str]]:
    """Return the pattern table restricted to the generic suffix tier."""
    return {
        platform: domains
        for platform, domains in PLATFORM_PATTERNS.items()
        if platform not in SKIP_PLATFORMS
    }


def _suffix_overlaps(first: str, second: str) -> bool:
    return first == second or first.endswith(f".{second}") or second.endswith(f".{first}")


def find_overlapping_domains() -> List[Tuple[Platform, str, Platform, str]]:
    """List domain pairs from different generic-tier platforms that can match the same host.

    The generic tier returns the first platform whose domain set matches, so an
    overlap would make the result depend on table order.
    """
    entries = [
        (platform, domain)
        for platform, domains in generic_tier_patterns().items()
        for domain in sorted(domains)
    ]
    overlaps = []
    for index, (platform, domain) in enumerate(entries):
        for other_platform, other_domain in entries[index + 1 :]:
            if platform is other_platform:
                continue
            if _suffix_overlaps(domain, other_domain):
                overlaps.append((platform, domain, other_platform, other_domain))
    return overlaps


def unreachable_skipped_domains() -> List[Tuple[Platform, str]]:
    """List domains of skipped platforms that no special subdomain rule covers."""
    special_hosts = {host for host, _ in SPECIAL_SUBDOMAIN_RULES}
    return [
        (platform, domain)
        for platform in SKIP_PLATFORMS
        for domain in sorted(PLATFORM_PATTERNS.get(platform, ()))
        if domain not in special_hosts
    ]


__all__ = [
    "PLATFORM_PATTERNS",
    "SPECIAL_SUBDOMAIN_RULES",
    "SKIP_PLATFORMS",
    "CUSTOM_SUBDOMAIN_RULES",
    "generic_tier_patterns",
    "find_overlapping_domains",
    "unreachable_skipped_domains",
]
