"""
Constantes partagees du client catalogue.

URLs des endpoints, user agent et identifiants d'appareil attendus
par les endpoints ATV.
"""

URL_ROOT = "https://www.amazon.com"
ATV_ROOT = "https://atv-ps.amazon.com/cdp/"

NOTIFIER_RESOURCES_URL = URL_ROOT + "/gp/deal/ajax/getNotifierResources.html"
PLAYER_TOKEN_URL = URL_ROOT + "/gp/video/streaming/player-token.json"
VIDEO_DETAIL_URL = URL_ROOT + "/gp/video/detail/"
ATV_CONTENT_URL = ATV_ROOT
ATV_PLAYBACK_URL = ATV_ROOT + "catalog/GetPlaybackResources"

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_12_3) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/56.0.2924.87 Safari/537.36"
)

HTML_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;"
    "q=0.9,image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3"
)

# Parametres ajoutes a toutes les requetes catalogue
DEFAULT_DEVICE_TYPE_ID = "A1MPSLFC7L5AFK"
DEFAULT_FIRMWARE = "fmw:15-app:1.1.19"

# Parametres propres a GetPlaybackResources
PLAYBACK_DEVICE_TYPE_ID = "AOAGZA014O5RE"
# Le systeme annonce conditionne l'obtention des flux HD
PLAYBACK_OS_NAME = "Mac OS X"
PLAYBACK_OS_VERSION = "10.14.2"
