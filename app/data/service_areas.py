# app/data/service_areas.py
"""
Hub cities and the nearby cities (within ~20 miles) each one serves.

Declaration order is the order pages, listings and the sitemap use.
"""
from ..models.service_area import City, Hub, HubNotes

HUBS: tuple[Hub, ...] = (
    Hub(
        name="Chambersburg",
        state="PA",
        slug="chambersburg-pa",
        latitude=39.9376,
        longitude=-77.6611,
        intro_copy="Based in Chambersburg, PA, DJ Miles Morales brings professional DJ services to the heart of south-central Pennsylvania.",
        index_city_pages=False,
        notes=HubNotes(
            travel_note="We typically travel within approximately 20 miles of Chambersburg, including areas like Waynesboro, Shippensburg, and Gettysburg. Setup time is usually 60-90 minutes before your event.",
            venue_note="Popular venues in the Chambersburg area include historic barns, community centers, and outdoor event spaces. We're familiar with local venues and their sound requirements.",
            neighborhood_note="Serving the greater Franklin County area, including rural communities and small towns throughout south-central Pennsylvania.",
        ),
    ),
    Hub(
        name="Washington",
        state="DC",
        slug="washington-dc",
        latitude=38.9072,
        longitude=-77.0369,
        intro_copy="Serving the Washington, DC metro area with premium DJ services for weddings, corporate events, and private celebrations.",
        index_city_pages=False,
        notes=HubNotes(
            travel_note="We serve the entire DC metro area, including Northern Virginia and Maryland suburbs within about 20 miles. Traffic considerations are factored into our setup timeline.",
            venue_note="DC is home to many prestigious venues, from historic hotels to modern event spaces. We've worked at venues throughout the District and surrounding areas.",
            neighborhood_note="Serving neighborhoods from Georgetown to Capitol Hill, and extending into Arlington, Alexandria, Bethesda, and Silver Spring.",
        ),
    ),
    Hub(
        name="Baltimore",
        state="MD",
        slug="baltimore-md",
        latitude=39.2904,
        longitude=-76.6122,
        intro_copy="Professional DJ services throughout the Baltimore metro area, from intimate gatherings to large-scale corporate events.",
        index_city_pages=False,
        notes=HubNotes(
            travel_note="We cover Baltimore and surrounding communities within approximately 20 miles, including Towson, Columbia, and Annapolis. Setup typically takes 60-90 minutes.",
            venue_note="Baltimore offers diverse venues from waterfront locations to historic buildings. We're experienced with venues throughout the Inner Harbor and surrounding neighborhoods.",
            neighborhood_note="Serving Baltimore City and County, including areas like Fells Point, Federal Hill, Canton, and extending to nearby suburbs.",
        ),
    ),
    Hub(
        name="Philadelphia",
        state="PA",
        slug="philadelphia-pa",
        latitude=39.9526,
        longitude=-75.1652,
        intro_copy="Bringing high-energy DJ services to Philadelphia and surrounding communities for weddings, parties, and corporate events.",
        index_city_pages=False,
        notes=HubNotes(
            travel_note="We serve Philadelphia and surrounding suburbs within about 20 miles, including areas in both Pennsylvania and New Jersey. Parking and venue access are considered in our planning.",
            venue_note="Philadelphia boasts a mix of historic venues, modern event spaces, and unique locations. We're familiar with venues throughout Center City and the surrounding region.",
            neighborhood_note="Serving Center City, University City, Old City, and extending to suburbs like King of Prussia, Conshohocken, and Cherry Hill, NJ.",
        ),
    ),
    Hub(
        name="Pittsburgh",
        state="PA",
        slug="pittsburgh-pa",
        latitude=40.4406,
        longitude=-79.9959,
        intro_copy="Professional DJ services for Pittsburgh-area events, from weddings to corporate galas and everything in between.",
        index_city_pages=False,
        notes=HubNotes(
            travel_note="We cover Pittsburgh and surrounding communities within approximately 20 miles, including areas like Mount Lebanon, Bethel Park, and Monroeville. Setup time accounts for Pittsburgh's unique geography.",
            venue_note="Pittsburgh offers diverse venues from industrial spaces to elegant ballrooms. We've worked at venues throughout the city and surrounding suburbs.",
            neighborhood_note="Serving neighborhoods from Downtown to the South Hills, North Hills, and East End, including areas like Shadyside, Squirrel Hill, and Lawrenceville.",
        ),
    ),
)

CITIES_BY_HUB: dict[str, tuple[City, ...]] = {
    "chambersburg-pa": (
        City("Waynesboro", "PA", "waynesboro-pa"),
        City("Shippensburg", "PA", "shippensburg-pa"),
        City("Greencastle", "PA", "greencastle-pa"),
        City("Mercersburg", "PA", "mercersburg-pa"),
        City("Fayetteville", "PA", "fayetteville-pa"),
        City("Scotland", "PA", "scotland-pa"),
        City("Marion", "PA", "marion-pa"),
        City("Saint Thomas", "PA", "saint-thomas-pa"),
        City("Newburg", "PA", "newburg-pa"),
        City("Fort Loudon", "PA", "fort-loudon-pa"),
        City("McConnellsburg", "PA", "mcconnellsburg-pa"),
        City("Carlisle", "PA", "carlisle-pa"),
        City("Hagerstown", "MD", "hagerstown-md"),
        City("Williamsport", "MD", "williamsport-md"),
        City("Smithsburg", "MD", "smithsburg-md"),
        City("Thurmont", "MD", "thurmont-md"),
        City("Gettysburg", "PA", "gettysburg-pa"),
        City("Orrtanna", "PA", "orrtanna-pa"),
        City("Biglerville", "PA", "biglerville-pa"),
        City("New Oxford", "PA", "new-oxford-pa"),
        City("Abbottstown", "PA", "abbottstown-pa"),
        City("York Springs", "PA", "york-springs-pa"),
        City("Dillsburg", "PA", "dillsburg-pa"),
        City("Mechanicsburg", "PA", "mechanicsburg-pa"),
        City("Boiling Springs", "PA", "boiling-springs-pa"),
        City("Newville", "PA", "newville-pa"),
        City("Orrstown", "PA", "orrstown-pa"),
        City("Fannettsburg", "PA", "fannettsburg-pa"),
        City("Dry Run", "PA", "dry-run-pa"),
        City("Mont Alto", "PA", "mont-alto-pa"),
        City("Rouzerville", "PA", "rouzerville-pa"),
        City("Blue Ridge Summit", "PA", "blue-ridge-summit-pa"),
        City("Cascade", "MD", "cascade-md"),
        City("Sabillasville", "MD", "sabillasville-md"),
        City("Emmitsburg", "MD", "emmitsburg-md"),
    ),
    "washington-dc": (
        City("Arlington", "VA", "arlington-va"),
        City("Alexandria", "VA", "alexandria-va"),
        City("Bethesda", "MD", "bethesda-md"),
        City("Silver Spring", "MD", "silver-spring-md"),
        City("Chevy Chase", "MD", "chevy-chase-md"),
        City("Rockville", "MD", "rockville-md"),
        City("Hyattsville", "MD", "hyattsville-md"),
        City("College Park", "MD", "college-park-md"),
        City("Greenbelt", "MD", "greenbelt-md"),
        City("Takoma Park", "MD", "takoma-park-md"),
        City("Falls Church", "VA", "falls-church-va"),
        City("McLean", "VA", "mclean-va"),
        City("Vienna", "VA", "vienna-va"),
        City("Annandale", "VA", "annandale-va"),
        City("Springfield", "VA", "springfield-va"),
        City("Capitol Heights", "MD", "capitol-heights-md"),
        City("Suitland", "MD", "suitland-md"),
        City("Largo", "MD", "largo-md"),
        City("Oxon Hill", "MD", "oxon-hill-md"),
        City("National Harbor", "MD", "national-harbor-md"),
        City("Fairfax", "VA", "fairfax-va"),
        City("Reston", "VA", "reston-va"),
        City("Herndon", "VA", "herndon-va"),
        City("Sterling", "VA", "sterling-va"),
        City("Leesburg", "VA", "leesburg-va"),
        City("Ashburn", "VA", "ashburn-va"),
        City("Manassas", "VA", "manassas-va"),
        City("Woodbridge", "VA", "woodbridge-va"),
        City("Burke", "VA", "burke-va"),
        City("Centreville", "VA", "centreville-va"),
        City("Chantilly", "VA", "chantilly-va"),
        City("Dumfries", "VA", "dumfries-va"),
        City("Laurel", "MD", "laurel-md"),
        City("Bowie", "MD", "bowie-md"),
        City("Upper Marlboro", "MD", "upper-marlboro-md"),
        City("Waldorf", "MD", "waldorf-md"),
        City("Clinton", "MD", "clinton-md"),
        City("Fort Washington", "MD", "fort-washington-md"),
        City("Accokeek", "MD", "accokeek-md"),
    ),
    "baltimore-md": (
        City("Towson", "MD", "towson-md"),
        City("Catonsville", "MD", "catonsville-md"),
        City("Ellicott City", "MD", "ellicott-city-md"),
        City("Columbia", "MD", "columbia-md"),
        City("Parkville", "MD", "parkville-md"),
        City("Dundalk", "MD", "dundalk-md"),
        City("Essex", "MD", "essex-md"),
        City("Middle River", "MD", "middle-river-md"),
        City("Rosedale", "MD", "rosedale-md"),
        City("Glen Burnie", "MD", "glen-burnie-md"),
        City("Linthicum", "MD", "linthicum-md"),
        City("Halethorpe", "MD", "halethorpe-md"),
        City("Arbutus", "MD", "arbutus-md"),
        City("Pikesville", "MD", "pikesville-md"),
        City("Cockeysville", "MD", "cockeysville-md"),
        City("Randallstown", "MD", "randallstown-md"),
        City("Reisterstown", "MD", "reisterstown-md"),
        City("Severn", "MD", "severn-md"),
        City("Pasadena", "MD", "pasadena-md"),
        City("Odenton", "MD", "odenton-md"),
        City("Millersville", "MD", "millersville-md"),
        City("Severna Park", "MD", "severna-park-md"),
        City("Arnold", "MD", "arnold-md"),
        City("Annapolis", "MD", "annapolis-md"),
        City("Edgewater", "MD", "edgewater-md"),
        City("Crofton", "MD", "crofton-md"),
        City("Gambrills", "MD", "gambrills-md"),
        City("Bel Air", "MD", "bel-air-md"),
        City("Aberdeen", "MD", "aberdeen-md"),
        City("Havre de Grace", "MD", "havre-de-grace-md"),
        City("Perry Hall", "MD", "perry-hall-md"),
        City("White Marsh", "MD", "white-marsh-md"),
        City("Nottingham", "MD", "nottingham-md"),
        City("Timonium", "MD", "timonium-md"),
        City("Lutherville", "MD", "lutherville-md"),
        City("Hunt Valley", "MD", "hunt-valley-md"),
        City("Sparks", "MD", "sparks-md"),
        City("Monkton", "MD", "monkton-md"),
    ),
    "philadelphia-pa": (
        City("Camden", "NJ", "camden-nj"),
        City("Cherry Hill", "NJ", "cherry-hill-nj"),
        City("Pennsauken", "NJ", "pennsauken-nj"),
        City("Collingswood", "NJ", "collingswood-nj"),
        City("Haddonfield", "NJ", "haddonfield-nj"),
        City("Deptford", "NJ", "deptford-nj"),
        City("Bala Cynwyd", "PA", "bala-cynwyd-pa"),
        City("Ardmore", "PA", "ardmore-pa"),
        City("Upper Darby", "PA", "upper-darby-pa"),
        City("Drexel Hill", "PA", "drexel-hill-pa"),
        City("Springfield", "PA", "springfield-pa"),
        City("Media", "PA", "media-pa"),
        City("Bensalem", "PA", "bensalem-pa"),
        City("Jenkintown", "PA", "jenkintown-pa"),
        City("Glenside", "PA", "glenside-pa"),
        City("Abington", "PA", "abington-pa"),
        City("Conshohocken", "PA", "conshohocken-pa"),
        City("King of Prussia", "PA", "king-of-prussia-pa"),
        City("Norristown", "PA", "norristown-pa"),
        City("West Chester", "PA", "west-chester-pa"),
        City("Malvern", "PA", "malvern-pa"),
        City("Wayne", "PA", "wayne-pa"),
        City("Radnor", "PA", "radnor-pa"),
        City("Bryn Mawr", "PA", "bryn-mawr-pa"),
        City("Narberth", "PA", "narberth-pa"),
        City("Wynnewood", "PA", "wynnewood-pa"),
        City("Merion", "PA", "merion-pa"),
        City("Overbrook", "PA", "overbrook-pa"),
        City("Yeadon", "PA", "yeadon-pa"),
        City("Lansdowne", "PA", "lansdowne-pa"),
        City("Darby", "PA", "darby-pa"),
        City("Sharon Hill", "PA", "sharon-hill-pa"),
        City("Folcroft", "PA", "folcroft-pa"),
        City("Ridley Park", "PA", "ridley-park-pa"),
        City("Swarthmore", "PA", "swarthmore-pa"),
        City("Wallingford", "PA", "wallingford-pa"),
        City("Chester", "PA", "chester-pa"),
        City("Marcus Hook", "PA", "marcus-hook-pa"),
        City("Essington", "PA", "essington-pa"),
        City("Tinicum", "PA", "tinicum-pa"),
    ),
    "pittsburgh-pa": (
        City("Mount Lebanon", "PA", "mount-lebanon-pa"),
        City("Bethel Park", "PA", "bethel-park-pa"),
        City("Upper St Clair", "PA", "upper-st-clair-pa"),
        City("Dormont", "PA", "dormont-pa"),
        City("Brentwood", "PA", "brentwood-pa"),
        City("Baldwin", "PA", "baldwin-pa"),
        City("Penn Hills", "PA", "penn-hills-pa"),
        City("Monroeville", "PA", "monroeville-pa"),
        City("Wilkinsburg", "PA", "wilkinsburg-pa"),
        City("Carnegie", "PA", "carnegie-pa"),
        City("Crafton", "PA", "crafton-pa"),
        City("Robinson Township", "PA", "robinson-township-pa"),
        City("Moon Township", "PA", "moon-township-pa"),
        City("West Mifflin", "PA", "west-mifflin-pa"),
        City("Homestead", "PA", "homestead-pa"),
        City("McKeesport", "PA", "mckeesport-pa"),
        City("Allison Park", "PA", "allison-park-pa"),
        City("Shaler", "PA", "shaler-pa"),
        City("Ross Township", "PA", "ross-township-pa"),
        City("McCandless", "PA", "mccandless-pa"),
        City("Franklin Park", "PA", "franklin-park-pa"),
        City("Sewickley", "PA", "sewickley-pa"),
        City("Leetsdale", "PA", "leetsdale-pa"),
        City("Edgeworth", "PA", "edgeworth-pa"),
        City("Oakmont", "PA", "oakmont-pa"),
        City("Plum", "PA", "plum-pa"),
        City("Murrysville", "PA", "murrysville-pa"),
        City("White Oak", "PA", "white-oak-pa"),
        City("North Versailles", "PA", "north-versailles-pa"),
        City("Turtle Creek", "PA", "turtle-creek-pa"),
        City("Swissvale", "PA", "swissvale-pa"),
        City("Forest Hills", "PA", "forest-hills-pa"),
        City("Braddock", "PA", "braddock-pa"),
        City("Duquesne", "PA", "duquesne-pa"),
        City("Glassport", "PA", "glassport-pa"),
        City("Elizabeth", "PA", "elizabeth-pa"),
        City("Clairton", "PA", "clairton-pa"),
        City("Jefferson Hills", "PA", "jefferson-hills-pa"),
        City("Pleasant Hills", "PA", "pleasant-hills-pa"),
    ),
}
