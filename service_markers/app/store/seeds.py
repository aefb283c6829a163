"""
Seed tables for the simulated map markers.

Each row is (network, identity, latitude, longitude, label, jitter). The
jitter is the half-width in degrees of the uniform offset applied once at
startup; rows with a jitter of 0 keep their exact position.
"""

from typing import Tuple

from .models import MarkerSeed

CITY_JITTER = 0.01
LOS_ANGELES_JITTER = 0.0075
SIMI_VALLEY_JITTER = 0.005

STELLAR = "Stellar"
CIRCLE = "Circle"


def _seeds(*rows) -> Tuple[MarkerSeed, ...]:
    return tuple(
        MarkerSeed(
            network=network,
            identity=identity,
            latitude=latitude,
            longitude=longitude,
            label=label,
            jitter=jitter,
        )
        for network, identity, latitude, longitude, label, jitter in rows
    )


# IoT base gateways
BASE_MARKER_SEEDS = _seeds(
    # City bases
    (STELLAR, "GA111111111111111111111111111111111111111111111111111", 37.7749, -122.4194,
     "IoT Base 100 - San Francisco", CITY_JITTER),
    (STELLAR, "GA222222222222222222222222222222222222222222222222222", 34.26945, -118.7815,
     "IoT Base-200 - Los Angeles", CITY_JITTER),
    (STELLAR, "GA333333333333333333333333333333333333333333333333333", 51.507351, -0.127758,
     "IoT Base-300 - London", CITY_JITTER),

    # Simi Valley, Stellar
    (STELLAR, "GCRQTKFXY7XZV76K5QIWOEJEL23ZRBRUMQAAV5WVPC4L5QOOZ6XAYEYO", 34.269447, -118.781479,
     "IoT Base-SV01 - Simi Valley", SIMI_VALLEY_JITTER),
    (STELLAR, "GSV02222222222222222222222222222222222222222222222222", 34.271856, -118.766459,
     "IoT Base-SV02 - Simi Valley", SIMI_VALLEY_JITTER),
    (STELLAR, "GSV03333333333333333333333333333333333333333333333333", 34.261392, -118.775471,
     "IoT Base-SV03 - Simi Valley", SIMI_VALLEY_JITTER),
    (STELLAR, "GSV33333333333333333333333333333333333333333333333333", 34.265432, -118.768234,
     "IoT Base-SV33 - Simi Valley", SIMI_VALLEY_JITTER),

    # Los Angeles, Circle
    (CIRCLE, "0x1111111111111111111111111111111111111111", 34.052235, -118.243683,
     "IoT Base-LA01 - Downtown", LOS_ANGELES_JITTER),
    (CIRCLE, "0x2222222222222222222222222222222222222222", 34.081402, -118.152809,
     "IoT Base-LA02 - East LA", LOS_ANGELES_JITTER),
    (CIRCLE, "0x3333333333333333333333333333333333333333", 34.147812, -118.359802,
     "IoT Base-LA03 - North Hollywood", LOS_ANGELES_JITTER),
    (CIRCLE, "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", 34.167431, -118.60875,
     "IoT Base-LA10 - Encino", LOS_ANGELES_JITTER),

    # Simi Valley, Circle
    (CIRCLE, "0xb111111111111111111111111111111111111111", 34.269447, -118.781482,
     "IoT Base-SV01 - Simi Valley Town Center", SIMI_VALLEY_JITTER),
    (CIRCLE, "0xb222222222222222222222222222222222222222", 34.276312, -118.766891,
     "IoT Base-SV02 - Wood Ranch", SIMI_VALLEY_JITTER),
    (CIRCLE, "0xb888888888888888888888888888888888888888", 34.280123, -118.742389,
     "IoT Base-SV08 - Big Sky Ranch", SIMI_VALLEY_JITTER),

    # Rio de Janeiro
    (STELLAR, "GBOOL6FPE2E24XWN26JXZASAOW4KP3WOZHNV67QSEMZ7HSODAB7RA7M6", -22.967852, -43.178983,
     "IoT Base-RIO01 - Christ the Redeemer", CITY_JITTER),
    (STELLAR, "GBWFXEJAJWG6TSYUOVE6OFQFEFJMQVJ54NO2IYMGQW2GSVFCCXANWLAB", -22.967852, -43.178983,
     "IoT Copacabana Palace", 0.0),
    (STELLAR, "GC2TR74CEDTJ46QJNTM3E4OU2Q2AR576LBXSDWCMKELMSF5UDQ2WF5QT", -22.9480, -43.1566,
     "IoT Base-RIO03 - Sugarloaf Mountain", CITY_JITTER),
    (STELLAR, "GAABVCQ6IPC3235RIHUPZ2HTY5G6O3WFYYD3CQGZAPXBMOJU7SFSDMFW", -22.9519, -43.2105,
     "IoT Base-RIO04 - Leblon", CITY_JITTER),
    (STELLAR, "GAWWB5OVQRDF25YDK3WX36QDMKFFJDHTCHTVXF7MOK2NQ6K6UBAYISUS", -22.9122, -43.2302,
     "IoT Base-RIO05 - Christ the Redeemer", CITY_JITTER),
    (STELLAR, "GAVGAV4T3SBJJIS735YRPI6D2BPKA7FJRYGRTDKAW4JEGFVK4YYHU6LN", -22.8943, -43.1809,
     "IoT Base-RIO06 - Flamengo", CITY_JITTER),
    (STELLAR, "GA4AFKYJ6CN53RYBEYPOUEG7EFHXTMVTO6HRXUGRNDYTIB6VXYQUJN3U", -22.9068, -43.1822,
     "IoT Base-RIO07 - Botafogo", CITY_JITTER),
    (STELLAR, "GASZVAC3BDCXWJ7M2EIDF7XKAG77KHEGVEQNOBZNGCF4MVEOH4DMKGUJ", -22.8975, -43.1803,
     "IoT Base-RIO08 - Urca", CITY_JITTER),
)

# Wallets
WALLET_MARKER_SEEDS = _seeds(
    # London
    (STELLAR, "GW111111111111111111111111111111111111111111111111111", 51.520156, -0.117860,
     "Wallet X - London", CITY_JITTER),
    (STELLAR, "GW222222222222222222222222222222222222222222222222222", 51.512634, -0.131724,
     "Wallet Y - London", CITY_JITTER),
    (STELLAR, "GW333333333333333333333333333333333333333333333333333", 51.507351, -0.127758,
     "Wallet X - London", CITY_JITTER),

    # Los Angeles
    (STELLAR, "GW444444444444444444444444444444444444444444444444444", 34.052235, -118.243683,
     "Wallet A - Los Angeles", LOS_ANGELES_JITTER),
    (STELLAR, "GW555555555555555555555555555555555555555555555555555", 34.040713, -118.246769,
     "Wallet B - Los Angeles", LOS_ANGELES_JITTER),
    (STELLAR, "GW666666666666666666666666666666666666666666666666666", 34.052235, -118.243683,
     "Wallet C - Los Angeles", LOS_ANGELES_JITTER),

    # Simi Valley
    (STELLAR, "GW777777777777777777777777777777777777777777777777777", 34.269447, -118.781479,
     "Wallet SV1 - Simi Valley", SIMI_VALLEY_JITTER),
    (STELLAR, "GW888888888888888888888888888888888888888888888888888", 34.271856, -118.766459,
     "Wallet SV2 - Simi Valley", SIMI_VALLEY_JITTER),
    (STELLAR, "GW999999999999999999999999999999999999999999999999999", 34.261392, -118.775471,
     "Wallet SV3 - Simi Valley", SIMI_VALLEY_JITTER),
    (STELLAR, "GW000000000000000000000000000000000000000000000000000", 34.277653, -118.788688,
     "Wallet SV4 - Simi Valley", SIMI_VALLEY_JITTER),
)
