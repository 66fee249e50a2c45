"""
Static BSD Link network table (BSD City, Tangerang).

Stop coordinates and route stop sequences for the eight BSD Link lines.
Pure data: build_bsd_link_network() turns it into a validated TransitNetwork.
"""

from .network import NetworkDefinitionError, TransitNetwork
from .route import Route
from .stop import Stop

ROUTE_COLORS = [
    "#A8DADC",  # Soft teal
    "#F4A261",  # Muted orange
    "#E9C46A",  # Warm yellow
    "#9B5DE5",  # Soft purple
    "#F28482",  # Light coral
    "#6A994E",  # Muted green
    "#FFB4A2",  # Pastel peach
    "#B5E48C",  # Light lime
]

BSD_LINK_STOPS = [
    Stop("BS01", "Intermoda", -6.319902912486388, 106.64371452384238),
    Stop("BS02", "Cosmo", -6.312098624472068, 106.64866097703134),
    Stop("BS03", "Verdant View", -6.3135382058171885, 106.64862335719445),
    Stop("BS04", "Eternity", -6.314804674128097, 106.64629166413174),
    Stop("BS05", "Simplicity 2", -6.313048540439234, 106.6425585810072),
    Stop("BS06", "Edutown 1", -6.3024419386956625, 106.64175422053961),
    Stop("BS07", "Edutown 2", -6.301401045958158, 106.64161410520205),
    Stop("BS08", "ICE 1", -6.297305991629695, 106.63663993540509),
    Stop("BS09", "ICE 2", -6.301798026906297, 106.63537576609392),
    Stop("BS10", "ICE Business Park", -6.303322716671507, 106.63447285075002),
    Stop("BS11", "ICE 6", -6.299214743448269, 106.63501661265211),
    Stop("BS12", "ICE 5", -6.296908022160658, 106.63614993540504),
    Stop("BS13", "GOP 1", -6.301333338511644, 106.6491341047173),
    Stop("BS14", "SML Plaza", -6.3018206829147045, 106.65107827402896),
    Stop("BS15", "The Breeze", -6.301369321397565, 106.65315717850528),
    Stop("BS16", "CBD Timur 1", -6.302837404339348, 106.65015285074993),
    Stop("BS17", "CBD Timur 2", -6.301030700563775, 106.64876966575737),
    Stop("BS18", "GOP 2", -6.301030700563775, 106.64876966575737),
    Stop("BS19", "Nava Park 1", -6.299573087873732, 106.64984707200264),
    Stop("BS20", "SWA 2", -6.299630155562472, 106.66243293720618),
    Stop("BS21", "Giant", -6.299347597253314, 106.6666351301771),
    Stop("BS22", "Eka Hospital 1", -6.299065485207059, 106.67031394722062),
    Stop("BS23", "Puspita Loka", -6.295377145696457, 106.67766489040433),
    Stop("BS24", "Polsek Serpong", -6.29603586772109, 106.68131227661276),
    Stop("BS25", "Ruko Madrid", -6.30196884684132, 106.6843857194694),
    Stop("BS26", "Pasar Modern Timur", -6.305348912751656, 106.68582347971999),
    Stop("BS27", "Griya Loka 1", -6.304835825560039, 106.68239886809873),
    Stop("BS28", "Sektor 1.3", -6.3057778200200305, 106.67991191028288),
    Stop("BS29", "Griya Loka 2", -6.304961931657671, 106.68151702006185),
    Stop("BS30", "Santa Ursula 1", -6.302771931151865, 106.6846528507499),
    Stop("BS31", "Santa Ursula 2", -6.300150681430886, 106.68316410471716),
    Stop("BS32", "Sentra Onderdil", -6.296683334763473, 106.6812441047167),
    Stop("BS33", "Autopart", -6.295531407562985, 106.67815419672414),
    Stop("BS34", "Eka Hospital 2", -6.299377523498342, 106.67009430185223),
    Stop("BS35", "East Business District", -6.299293336866941, 106.6669586814378),
    Stop("BS36", "SWA 1", -6.299345368339194, 106.6627761735028),
    Stop("BS37", "Green Cove", -6.2993814628841855, 106.65987993540543),
    Stop("BS38", "AEON Mall 1", -6.303120040327548, 106.64347755092595),
    Stop("BS39", "CBD Barat 2", -6.302221368040868, 106.64205317791004),
    Stop("BS40", "Simplicity 1", -6.312784863402183, 106.64423142592663),
    Stop("BS41", "Greenwich Park Office", -6.276622057947269, 106.63404),
    Stop("BS42", "De Maja", -6.280957532704141, 106.63961596488363),
    Stop("BS43", "De Heliconia 2", -6.283308041078943, 106.64115927116399),
    Stop("BS44", "De Nara", -6.285010028454532, 106.64400801314942),
    Stop("BS45", "De Park 2", -6.286975378906274, 106.64901655547753),
    Stop("BS46", "Nava Park 2", -6.290774052160064, 106.64982436896942),
    Stop("BS47", "Giardina", -6.291448715328519, 106.64828215809898),
    Stop("BS48", "Collinare", -6.2906680437956, 106.64538437301604),
    Stop("BS49", "Foglio", -6.293770702497992, 106.64307050539043),
    Stop("BS50", "Studento 2", -6.295336698270585, 106.642156093254),
    Stop("BS51", "Albera", -6.296627753866824, 106.64468911954826),
    Stop("BS52", "Foresta 1", -6.296720702463259, 106.647792186508),
    Stop("BS53", "Simpang Foresta", -6.299027376515015, 106.6479729112976),
    Stop("BS54", "Allevare", -6.297092109712094, 106.64701553315535),
    Stop("BS55", "Fiore", -6.296699551490208, 106.64459637983225),
    Stop("BS56", "Studento 1", -6.29562483743795, 106.64207466523365),
    Stop("BS57", "Naturale", -6.293753267157416, 106.64283525450247),
    Stop("BS58", "Fresco", -6.290917364823557, 106.64513283298477),
    Stop("BS59", "Primavera", -6.291167379758763, 106.64836291534402),
    Stop("BS60", "Foresta 2", -6.290166708825742, 106.64961926711759),
    Stop("BS61", "FBL 5", -6.28803670795394, 106.64433874198559),
    Stop("BS62", "Courts Mega Store", -6.286230035126002, 106.63887072883601),
    Stop("BS63", "Q BIG 1", -6.284470858067212, 106.63834676447388),
    Stop("BS64", "Lulu", -6.2806509823429675, 106.6363809368485),
    Stop("BS65", "Greenwich Park 1", -6.27722670353427, 106.63519582664144),
    Stop("BS66", "Prestigia", -6.294574704864883, 106.63434147612814),
    Stop("BS67", "The Mozia 1", -6.291653845052858, 106.62850019474901),
    Stop("BS68", "Vanya Park", -6.295320322717712, 106.62186825923906),
    Stop("BS69", "Piazza Mozia", -6.290512106223089, 106.62767242455752),
    Stop("BS70", "The Mozia 2", -6.291595339802968, 106.62865576632026),
    Stop("BS71", "Illustria", -6.294029293630429, 106.63433876241467),
    Stop("BS72", "CBD Barat 2", -6.3023066800188365, 106.64210145762934),
    Stop("BS73", "Lobby AEON Mall", -6.303683149161957, 106.64356012276883),
    Stop("BS74", "CBD Utara 3", -6.2987607030499175, 106.6433604073996),
    Stop("BS75", "CBD Barat 1", -6.299449375144083, 106.64191227244648),
    Stop("BS76", "AEON Mall 2", -6.302851368209015, 106.64431300128254),
    Stop("BS77", "Froogy", -6.29724016790295, 106.64050719580258),
    Stop("BS78", "Gramedia", -6.291269859841771, 106.6394645156416),
    Stop("BS79", "Icon Centro", -6.314595375739716, 106.646253224144),
    Stop("BS80", "Horizon Broadway", -6.313141392686883, 106.6503970845614),
    Stop("BS81", "BSD Extreme Park", -6.30975136988534, 106.6537962107912),
    Stop("BS82", "Saveria", -6.307346701354917, 106.65359854223301),
]

# (route id, display name, color, stop ids in travel order)
BSD_LINK_ROUTES = [
    ("R01", "Intermoda - Sektor 1.3", ROUTE_COLORS[0], ["BS01", "BS05", "BS06", "BS07", "BS13", "BS14", "BS15", "BS16", "BS17", "BS19", "BS22", "BS23", "BS24", "BS25", "BS26", "BS27", "BS28"]),
    ("R02", "Sektor 1.3 - Intermoda", ROUTE_COLORS[1], ["BS28", "BS29", "BS30", "BS31", "BS32", "BS33", "BS34", "BS35", "BS36", "BS15", "BS16", "BS17", "BS40", "BS01"]),
    ("R03", "Greenwich Park - Sektor 1.3", ROUTE_COLORS[2], ["BS41", "BS42", "BS43", "BS44", "BS45", "BS47", "BS48", "BS49", "BS50", "BS51", "BS52", "BS13", "BS14", "BS15", "BS16", "BS17", "BS19", "BS22", "BS23", "BS26", "BS27", "BS28"]),
    ("R04", "Sektor 1.3 - Greenwich Park", ROUTE_COLORS[3], ["BS28", "BS29", "BS30", "BS31", "BS32", "BS33", "BS34", "BS35", "BS36", "BS15", "BS16", "BS17", "BS53", "BS54", "BS55", "BS56", "BS57", "BS58", "BS59", "BS62", "BS63", "BS64", "BS65", "BS41"]),
    ("R05", "Intermoda - De Park (Rute 1)", ROUTE_COLORS[4], ["BS01", "BS05", "BS06", "BS07", "BS08", "BS12", "BS77", "BS78", "BS62", "BS63", "BS64", "BS65", "BS41", "BS42", "BS43", "BS44", "BS45"]),
    ("R06", "Intermoda - De Park (Rute 2)", ROUTE_COLORS[5], ["BS01", "BS79", "BS80", "BS81", "BS82", "BS14", "BS15", "BS16", "BS38", "BS76", "BS17", "BS53", "BS54", "BS55", "BS56", "BS57", "BS58", "BS59", "BS60", "BS45"]),
    ("R07", "The Breeze - AEON - ICE - The Breeze", ROUTE_COLORS[6], ["BS15", "BS16", "BS17", "BS74", "BS75", "BS72", "BS38", "BS76", "BS74", "BS10", "BS12", "BS75", "BS72", "BS38", "BS76", "BS17", "BS19", "BS37", "BS15"]),
    ("R08", "Intermoda - Vanya Park - Intermoda", ROUTE_COLORS[7], ["BS01", "BS03", "BS04", "BS05", "BS48", "BS49", "BS50", "BS51", "BS67", "BS45", "BS46", "BS47", "BS68", "BS69", "BS70", "BS71", "BS72", "BS06", "BS07", "BS08", "BS73", "BS74", "BS55", "BS75", "BS09", "BS56", "BS57", "BS61", "BS62", "BS63", "BS02", "BS01"]),
]


def build_bsd_link_network():
    """Build the BSD Link network. Raises NetworkDefinitionError if the table is inconsistent."""
    stops_by_id = {stop.stop_id: stop for stop in BSD_LINK_STOPS}
    routes = []
    for route_id, name, color, stop_ids in BSD_LINK_ROUTES:
        unknown = [stop_id for stop_id in stop_ids if stop_id not in stops_by_id]
        if unknown:
            raise NetworkDefinitionError(f"Route {route_id} references unknown stops: {unknown}")
        stops = [stops_by_id[stop_id] for stop_id in stop_ids]
        routes.append(Route(route_id, name, stops, color=color))
    return TransitNetwork(BSD_LINK_STOPS, routes)
