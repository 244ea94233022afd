"""
Display-name tables for open-ended ids.

Species, move and ability ids stay plain ints on decoded records.  These
tables resolve them for display; ids outside a table fall back to a
``"Species #n"`` style placeholder rather than failing.
"""

from typing import Dict

# ── Species (national dex 1-905) ──────────────────────────────────────────────
SPECIES_NAMES: Dict[int, str] = {
    1:"Bulbasaur",2:"Ivysaur",3:"Venusaur",4:"Charmander",5:"Charmeleon",
    6:"Charizard",7:"Squirtle",8:"Wartortle",9:"Blastoise",10:"Caterpie",
    11:"Metapod",12:"Butterfree",13:"Weedle",14:"Kakuna",15:"Beedrill",
    16:"Pidgey",17:"Pidgeotto",18:"Pidgeot",19:"Rattata",20:"Raticate",
    21:"Spearow",22:"Fearow",23:"Ekans",24:"Arbok",25:"Pikachu",26:"Raichu",
    27:"Sandshrew",28:"Sandslash",29:"Nidoran-F",30:"Nidorina",31:"Nidoqueen",
    32:"Nidoran-M",33:"Nidorino",34:"Nidoking",35:"Clefairy",36:"Clefable",
    37:"Vulpix",38:"Ninetales",39:"Jigglypuff",40:"Wigglytuff",41:"Zubat",
    42:"Golbat",43:"Oddish",44:"Gloom",45:"Vileplume",46:"Paras",47:"Parasect",
    48:"Venonat",49:"Venomoth",50:"Diglett",51:"Dugtrio",52:"Meowth",53:"Persian",
    54:"Psyduck",55:"Golduck",56:"Mankey",57:"Primeape",58:"Growlithe",59:"Arcanine",
    60:"Poliwag",61:"Poliwhirl",62:"Poliwrath",63:"Abra",64:"Kadabra",65:"Alakazam",
    66:"Machop",67:"Machoke",68:"Machamp",69:"Bellsprout",70:"Weepinbell",
    71:"Victreebel",72:"Tentacool",73:"Tentacruel",74:"Geodude",75:"Graveler",
    76:"Golem",77:"Ponyta",78:"Rapidash",79:"Slowpoke",80:"Slowbro",
    81:"Magnemite",82:"Magneton",83:"Farfetch'd",84:"Doduo",85:"Dodrio",
    86:"Seel",87:"Dewgong",88:"Grimer",89:"Muk",90:"Shellder",91:"Cloyster",
    92:"Gastly",93:"Haunter",94:"Gengar",95:"Onix",96:"Drowzee",97:"Hypno",
    98:"Krabby",99:"Kingler",100:"Voltorb",101:"Electrode",102:"Exeggcute",
    103:"Exeggutor",104:"Cubone",105:"Marowak",106:"Hitmonlee",107:"Hitmonchan",
    108:"Lickitung",109:"Koffing",110:"Weezing",111:"Rhyhorn",112:"Rhydon",
    113:"Chansey",114:"Tangela",115:"Kangaskhan",116:"Horsea",117:"Seadra",
    118:"Goldeen",119:"Seaking",120:"Staryu",121:"Starmie",122:"Mr. Mime",
    123:"Scyther",124:"Jynx",125:"Electabuzz",126:"Magmar",127:"Pinsir",
    128:"Tauros",129:"Magikarp",130:"Gyarados",131:"Lapras",132:"Ditto",
    133:"Eevee",134:"Vaporeon",135:"Jolteon",136:"Flareon",137:"Porygon",
    138:"Omanyte",139:"Omastar",140:"Kabuto",141:"Kabutops",142:"Aerodactyl",
    143:"Snorlax",144:"Articuno",145:"Zapdos",146:"Moltres",147:"Dratini",
    148:"Dragonair",149:"Dragonite",150:"Mewtwo",151:"Mew",
    152:"Chikorita",153:"Bayleef",154:"Meganium",155:"Cyndaquil",156:"Quilava",
    157:"Typhlosion",158:"Totodile",159:"Croconaw",160:"Feraligatr",
    161:"Sentret",162:"Furret",163:"Hoothoot",164:"Noctowl",165:"Ledyba",
    166:"Ledian",167:"Spinarak",168:"Ariados",169:"Crobat",170:"Chinchou",
    171:"Lanturn",172:"Pichu",173:"Cleffa",174:"Igglybuff",175:"Togepi",
    176:"Togetic",177:"Natu",178:"Xatu",179:"Mareep",180:"Flaaffy",
    181:"Ampharos",182:"Bellossom",183:"Marill",184:"Azumarill",185:"Sudowoodo",
    186:"Politoed",187:"Hoppip",188:"Skiploom",189:"Jumpluff",190:"Aipom",
    191:"Sunkern",192:"Sunflora",193:"Yanma",194:"Wooper",195:"Quagsire",
    196:"Espeon",197:"Umbreon",198:"Murkrow",199:"Slowking",200:"Misdreavus",
    201:"Unown",202:"Wobbuffet",203:"Girafarig",204:"Pineco",205:"Forretress",
    206:"Dunsparce",207:"Gligar",208:"Steelix",209:"Snubbull",210:"Granbull",
    211:"Qwilfish",212:"Scizor",213:"Shuckle",214:"Heracross",215:"Sneasel",
    216:"Teddiursa",217:"Ursaring",218:"Slugma",219:"Magcargo",220:"Swinub",
    221:"Piloswine",222:"Corsola",223:"Remoraid",224:"Octillery",225:"Delibird",
    226:"Mantine",227:"Skarmory",228:"Houndour",229:"Houndoom",230:"Kingdra",
    231:"Phanpy",232:"Donphan",233:"Porygon2",234:"Stantler",235:"Smeargle",
    236:"Tyrogue",237:"Hitmontop",238:"Smoochum",239:"Elekid",240:"Magby",
    241:"Miltank",242:"Blissey",243:"Raikou",244:"Entei",245:"Suicune",
    246:"Larvitar",247:"Pupitar",248:"Tyranitar",249:"Lugia",250:"Ho-Oh",
    251:"Celebi",252:"Treecko",253:"Grovyle",254:"Sceptile",255:"Torchic",
    256:"Combusken",257:"Blaziken",258:"Mudkip",259:"Marshtomp",260:"Swampert",
    261:"Poochyena",262:"Mightyena",263:"Zigzagoon",264:"Linoone",265:"Wurmple",
    266:"Silcoon",267:"Beautifly",268:"Cascoon",269:"Dustox",270:"Lotad",
    271:"Lombre",272:"Ludicolo",273:"Seedot",274:"Nuzleaf",275:"Shiftry",
    276:"Taillow",277:"Swellow",278:"Wingull",279:"Pelipper",280:"Ralts",
    281:"Kirlia",282:"Gardevoir",283:"Surskit",284:"Masquerain",285:"Shroomish",
    286:"Breloom",287:"Slakoth",288:"Vigoroth",289:"Slaking",290:"Nincada",
    291:"Ninjask",292:"Shedinja",293:"Whismur",294:"Loudred",295:"Exploud",
    296:"Makuhita",297:"Hariyama",298:"Azurill",299:"Nosepass",300:"Skitty",
    301:"Delcatty",302:"Sableye",303:"Mawile",304:"Aron",305:"Lairon",
    306:"Aggron",307:"Meditite",308:"Medicham",309:"Electrike",310:"Manectric",
    311:"Plusle",312:"Minun",313:"Volbeat",314:"Illumise",315:"Roselia",
    316:"Gulpin",317:"Swalot",318:"Carvanha",319:"Sharpedo",320:"Wailmer",
    321:"Wailord",322:"Numel",323:"Camerupt",324:"Torkoal",325:"Spoink",
    326:"Grumpig",327:"Spinda",328:"Trapinch",329:"Vibrava",330:"Flygon",
    331:"Cacnea",332:"Cacturne",333:"Swablu",334:"Altaria",335:"Zangoose",
    336:"Seviper",337:"Lunatone",338:"Solrock",339:"Barboach",340:"Whiscash",
    341:"Corphish",342:"Crawdaunt",343:"Baltoy",344:"Claydol",345:"Lileep",
    346:"Cradily",347:"Anorith",348:"Armaldo",349:"Feebas",350:"Milotic",
    351:"Castform",352:"Kecleon",353:"Shuppet",354:"Banette",355:"Duskull",
    356:"Dusclops",357:"Tropius",358:"Chimecho",359:"Absol",360:"Wynaut",
    361:"Snorunt",362:"Glalie",363:"Spheal",364:"Sealeo",365:"Walrein",
    366:"Clamperl",367:"Huntail",368:"Gorebyss",369:"Relicanth",370:"Luvdisc",
    371:"Bagon",372:"Shelgon",373:"Salamence",374:"Beldum",375:"Metang",
    376:"Metagross",377:"Regirock",378:"Regice",379:"Registeel",380:"Latias",
    381:"Latios",382:"Kyogre",383:"Groudon",384:"Rayquaza",385:"Jirachi",
    386:"Deoxys",
    387:"Turtwig",388:"Grotle",389:"Torterra",390:"Chimchar",391:"Monferno",
    392:"Infernape",393:"Piplup",394:"Prinplup",395:"Empoleon",396:"Starly",
    397:"Staravia",398:"Staraptor",399:"Bidoof",400:"Bibarel",401:"Kricketot",
    402:"Kricketune",403:"Shinx",404:"Luxio",405:"Luxray",406:"Budew",
    407:"Roserade",408:"Cranidos",409:"Rampardos",410:"Shieldon",411:"Bastiodon",
    412:"Burmy",413:"Wormadam",414:"Mothim",415:"Combee",416:"Vespiquen",
    417:"Pachirisu",418:"Buizel",419:"Floatzel",420:"Cherubi",421:"Cherrim",
    422:"Shellos",423:"Gastrodon",424:"Ambipom",425:"Drifloon",426:"Drifblim",
    427:"Buneary",428:"Lopunny",429:"Mismagius",430:"Honchkrow",431:"Glameow",
    432:"Purugly",433:"Chingling",434:"Stunky",435:"Skuntank",436:"Bronzor",
    437:"Bronzong",438:"Bonsly",439:"Mime Jr.",440:"Happiny",441:"Chatot",
    442:"Spiritomb",443:"Gible",444:"Gabite",445:"Garchomp",446:"Munchlax",
    447:"Riolu",448:"Lucario",449:"Hippopotas",450:"Hippowdon",451:"Skorupi",
    452:"Drapion",453:"Croagunk",454:"Toxicroak",455:"Carnivine",456:"Finneon",
    457:"Lumineon",458:"Mantyke",459:"Snover",460:"Abomasnow",461:"Weavile",
    462:"Magnezone",463:"Lickilicky",464:"Rhyperior",465:"Tangrowth",
    466:"Electivire",467:"Magmortar",468:"Togekiss",469:"Yanmega",470:"Leafeon",
    471:"Glaceon",472:"Gliscor",473:"Mamoswine",474:"Porygon-Z",475:"Gallade",
    476:"Probopass",477:"Dusknoir",478:"Froslass",479:"Rotom",480:"Uxie",
    481:"Mesprit",482:"Azelf",483:"Dialga",484:"Palkia",485:"Heatran",
    486:"Regigigas",487:"Giratina",488:"Cresselia",489:"Phione",490:"Manaphy",
    491:"Darkrai",492:"Shaymin",493:"Arceus",
    494:"Victini",495:"Snivy",496:"Servine",497:"Serperior",498:"Tepig",
    499:"Pignite",500:"Emboar",501:"Oshawott",502:"Dewott",503:"Samurott",
    504:"Patrat",505:"Watchog",506:"Lillipup",507:"Herdier",508:"Stoutland",
    509:"Purrloin",510:"Liepard",511:"Pansage",512:"Simisage",513:"Pansear",
    514:"Simisear",515:"Panpour",516:"Simipour",517:"Munna",518:"Musharna",
    519:"Pidove",520:"Tranquill",521:"Unfezant",522:"Blitzle",523:"Zebstrika",
    524:"Roggenrola",525:"Boldore",526:"Gigalith",527:"Woobat",528:"Swoobat",
    529:"Drilbur",530:"Excadrill",531:"Audino",532:"Timburr",533:"Gurdurr",
    534:"Conkeldurr",535:"Tympole",536:"Palpitoad",537:"Seismitoad",538:"Throh",
    539:"Sawk",540:"Sewaddle",541:"Swadloon",542:"Leavanny",543:"Venipede",
    544:"Whirlipede",545:"Scolipede",546:"Cottonee",547:"Whimsicott",548:"Petilil",
    549:"Lilligant",550:"Basculin",551:"Sandile",552:"Krokorok",553:"Krookodile",
    554:"Darumaka",555:"Darmanitan",556:"Maractus",557:"Dwebble",558:"Crustle",
    559:"Scraggy",560:"Scrafty",561:"Sigilyph",562:"Yamask",563:"Cofagrigus",
    564:"Tirtouga",565:"Carracosta",566:"Archen",567:"Archeops",568:"Trubbish",
    569:"Garbodor",570:"Zorua",571:"Zoroark",572:"Minccino",573:"Cinccino",
    574:"Gothita",575:"Gothorita",576:"Gothitelle",577:"Solosis",578:"Duosion",
    579:"Reuniclus",580:"Ducklett",581:"Swanna",582:"Vanillite",583:"Vanillish",
    584:"Vanilluxe",585:"Deerling",586:"Sawsbuck",587:"Emolga",588:"Karrablast",
    589:"Escavalier",590:"Foongus",591:"Amoonguss",592:"Frillish",593:"Jellicent",
    594:"Alomomola",595:"Joltik",596:"Galvantula",597:"Ferroseed",598:"Ferrothorn",
    599:"Klink",600:"Klang",601:"Klinklang",602:"Tynamo",603:"Eelektrik",
    604:"Eelektross",605:"Elgyem",606:"Beheeyem",607:"Litwick",608:"Lampent",
    609:"Chandelure",610:"Axew",611:"Fraxure",612:"Haxorus",613:"Cubchoo",
    614:"Beartic",615:"Cryogonal",616:"Shelmet",617:"Accelgor",618:"Stunfisk",
    619:"Mienfoo",620:"Mienshao",621:"Druddigon",622:"Golett",623:"Golurk",
    624:"Pawniard",625:"Bisharp",626:"Bouffalant",627:"Rufflet",628:"Braviary",
    629:"Vullaby",630:"Mandibuzz",631:"Heatmor",632:"Durant",633:"Deino",
    634:"Zweilous",635:"Hydreigon",636:"Larvesta",637:"Volcarona",638:"Cobalion",
    639:"Terrakion",640:"Virizion",641:"Tornadus",642:"Thundurus",643:"Reshiram",
    644:"Zekrom",645:"Landorus",646:"Kyurem",647:"Keldeo",648:"Meloetta",
    649:"Genesect",
    650:"Chespin",651:"Quilladin",652:"Chesnaught",653:"Fennekin",654:"Braixen",
    655:"Delphox",656:"Froakie",657:"Frogadier",658:"Greninja",659:"Bunnelby",
    660:"Diggersby",661:"Fletchling",662:"Fletchinder",663:"Talonflame",
    664:"Scatterbug",665:"Spewpa",666:"Vivillon",667:"Litleo",668:"Pyroar",
    669:"Flabebe",670:"Floette",671:"Florges",672:"Skiddo",673:"Gogoat",
    674:"Pancham",675:"Pangoro",676:"Furfrou",677:"Espurr",678:"Meowstic",
    679:"Honedge",680:"Doublade",681:"Aegislash",682:"Spritzee",683:"Aromatisse",
    684:"Swirlix",685:"Slurpuff",686:"Inkay",687:"Malamar",688:"Binacle",
    689:"Barbaracle",690:"Skrelp",691:"Dragalge",692:"Clauncher",693:"Clawitzer",
    694:"Helioptile",695:"Heliolisk",696:"Tyrunt",697:"Tyrantrum",698:"Amaura",
    699:"Aurorus",700:"Sylveon",701:"Hawlucha",702:"Dedenne",703:"Carbink",
    704:"Goomy",705:"Sliggoo",706:"Goodra",707:"Klefki",708:"Phantump",
    709:"Trevenant",710:"Pumpkaboo",711:"Gourgeist",712:"Bergmite",713:"Avalugg",
    714:"Noibat",715:"Noivern",716:"Xerneas",717:"Yveltal",718:"Zygarde",
    719:"Diancie",720:"Hoopa",721:"Volcanion",
    722:"Rowlet",723:"Dartrix",724:"Decidueye",725:"Litten",726:"Torracat",
    727:"Incineroar",728:"Popplio",729:"Brionne",730:"Primarina",731:"Pikipek",
    732:"Trumbeak",733:"Toucannon",734:"Yungoos",735:"Gumshoos",736:"Grubbin",
    737:"Charjabug",738:"Vikavolt",739:"Crabrawler",740:"Crabominable",
    741:"Oricorio",742:"Cutiefly",743:"Ribombee",744:"Rockruff",745:"Lycanroc",
    746:"Wishiwashi",747:"Mareanie",748:"Toxapex",749:"Mudbray",750:"Mudsdale",
    751:"Dewpider",752:"Araquanid",753:"Fomantis",754:"Lurantis",755:"Morelull",
    756:"Shiinotic",757:"Salandit",758:"Salazzle",759:"Stufful",760:"Bewear",
    761:"Bounsweet",762:"Steenee",763:"Tsareena",764:"Comfey",765:"Oranguru",
    766:"Passimian",767:"Wimpod",768:"Golisopod",769:"Sandygast",770:"Palossand",
    771:"Pyukumuku",772:"Type: Null",773:"Silvally",774:"Minior",775:"Komala",
    776:"Turtonator",777:"Togedemaru",778:"Mimikyu",779:"Bruxish",780:"Drampa",
    781:"Dhelmise",782:"Jangmo-o",783:"Hakamo-o",784:"Kommo-o",785:"Tapu Koko",
    786:"Tapu Lele",787:"Tapu Bulu",788:"Tapu Fini",789:"Cosmog",790:"Cosmoem",
    791:"Solgaleo",792:"Lunala",793:"Nihilego",794:"Buzzwole",795:"Pheromosa",
    796:"Xurkitree",797:"Celesteela",798:"Kartana",799:"Guzzlord",800:"Necrozma",
    801:"Magearna",802:"Marshadow",803:"Poipole",804:"Naganadel",805:"Stakataka",
    806:"Blacephalon",807:"Zeraora",808:"Meltan",809:"Melmetal",
    810:"Grookey",811:"Thwackey",812:"Rillaboom",813:"Scorbunny",814:"Raboot",
    815:"Cinderace",816:"Sobble",817:"Drizzile",818:"Inteleon",819:"Skwovet",
    820:"Greedent",821:"Rookidee",822:"Corvisquire",823:"Corviknight",
    824:"Blipbug",825:"Dottler",826:"Orbeetle",827:"Nickit",828:"Thievul",
    829:"Gossifleur",830:"Eldegoss",831:"Wooloo",832:"Dubwool",833:"Chewtle",
    834:"Drednaw",835:"Yamper",836:"Boltund",837:"Rolycoly",838:"Carkol",
    839:"Coalossal",840:"Applin",841:"Flapple",842:"Appletun",843:"Silicobra",
    844:"Sandaconda",845:"Cramorant",846:"Arrokuda",847:"Barraskewda",
    848:"Toxel",849:"Toxtricity",850:"Sizzlipede",851:"Centiskorch",
    852:"Clobbopus",853:"Grapploct",854:"Sinistea",855:"Polteageist",
    856:"Hatenna",857:"Hattrem",858:"Hatterene",859:"Impidimp",860:"Morgrem",
    861:"Grimmsnarl",862:"Obstagoon",863:"Perrserker",864:"Cursola",
    865:"Sirfetch'd",866:"Mr. Rime",867:"Runerigus",868:"Milcery",869:"Alcremie",
    870:"Falinks",871:"Pincurchin",872:"Snom",873:"Frosmoth",874:"Stonjourner",
    875:"Eiscue",876:"Indeedee",877:"Morpeko",878:"Cufant",879:"Copperajah",
    880:"Dracozolt",881:"Arctozolt",882:"Dracovish",883:"Arctovish",
    884:"Duraludon",885:"Dreepy",886:"Drakloak",887:"Dragapult",888:"Zacian",
    889:"Zamazenta",890:"Eternatus",891:"Kubfu",892:"Urshifu",893:"Zarude",
    894:"Regieleki",895:"Regidrago",896:"Glastrier",897:"Spectrier",898:"Calyrex",
    899:"Wyrdeer",900:"Kleavor",901:"Ursaluna",902:"Basculegion",903:"Sneasler",
    904:"Overqwil",905:"Enamorus",
}

# ── Moves (0-467; later moves fall back) ──────────────────────────────────────
MOVE_NAMES: Dict[int, str] = {
    0:"---",1:"Pound",2:"Karate Chop",3:"Double Slap",4:"Comet Punch",
    5:"Mega Punch",6:"Pay Day",7:"Fire Punch",8:"Ice Punch",9:"Thunder Punch",
    10:"Scratch",11:"Vise Grip",12:"Guillotine",13:"Razor Wind",14:"Swords Dance",
    15:"Cut",16:"Gust",17:"Wing Attack",18:"Whirlwind",19:"Fly",
    20:"Bind",21:"Slam",22:"Vine Whip",23:"Stomp",24:"Double Kick",
    25:"Mega Kick",26:"Jump Kick",27:"Rolling Kick",28:"Sand Attack",29:"Headbutt",
    30:"Horn Attack",31:"Fury Attack",32:"Horn Drill",33:"Tackle",34:"Body Slam",
    35:"Wrap",36:"Take Down",37:"Thrash",38:"Double-Edge",39:"Tail Whip",
    40:"Poison Sting",41:"Twineedle",42:"Pin Missile",43:"Leer",44:"Bite",
    45:"Growl",46:"Roar",47:"Sing",48:"Supersonic",49:"Sonic Boom",
    50:"Disable",51:"Acid",52:"Ember",53:"Flamethrower",54:"Mist",
    55:"Water Gun",56:"Hydro Pump",57:"Surf",58:"Ice Beam",59:"Blizzard",
    60:"Psybeam",61:"Bubble Beam",62:"Aurora Beam",63:"Hyper Beam",64:"Peck",
    65:"Drill Peck",66:"Submission",67:"Low Kick",68:"Counter",69:"Seismic Toss",
    70:"Strength",71:"Absorb",72:"Mega Drain",73:"Leech Seed",74:"Growth",
    75:"Razor Leaf",76:"Solar Beam",77:"Poison Powder",78:"Stun Spore",79:"Sleep Powder",
    80:"Petal Dance",81:"String Shot",82:"Dragon Rage",83:"Fire Spin",84:"Thunder Shock",
    85:"Thunderbolt",86:"Thunder Wave",87:"Thunder",88:"Rock Throw",89:"Earthquake",
    90:"Fissure",91:"Dig",92:"Toxic",93:"Confusion",94:"Psychic",
    95:"Hypnosis",96:"Meditate",97:"Agility",98:"Quick Attack",99:"Rage",
    100:"Teleport",101:"Night Shade",102:"Mimic",103:"Screech",104:"Double Team",
    105:"Recover",106:"Harden",107:"Minimize",108:"Smokescreen",109:"Confuse Ray",
    110:"Withdraw",111:"Defense Curl",112:"Barrier",113:"Light Screen",114:"Haze",
    115:"Reflect",116:"Focus Energy",117:"Bide",118:"Metronome",119:"Mirror Move",
    120:"Self-Destruct",121:"Egg Bomb",122:"Lick",123:"Smog",124:"Sludge",
    125:"Bone Club",126:"Fire Blast",127:"Waterfall",128:"Clamp",129:"Swift",
    130:"Skull Bash",131:"Spike Cannon",132:"Constrict",133:"Amnesia",134:"Kinesis",
    135:"Soft-Boiled",136:"High Jump Kick",137:"Glare",138:"Dream Eater",139:"Poison Gas",
    140:"Barrage",141:"Leech Life",142:"Lovely Kiss",143:"Sky Attack",144:"Transform",
    145:"Bubble",146:"Dizzy Punch",147:"Spore",148:"Flash",149:"Psywave",
    150:"Splash",151:"Acid Armor",152:"Crabhammer",153:"Explosion",154:"Fury Swipes",
    155:"Bonemerang",156:"Rest",157:"Rock Slide",158:"Hyper Fang",159:"Sharpen",
    160:"Conversion",161:"Tri Attack",162:"Super Fang",163:"Slash",164:"Substitute",
    165:"Struggle",166:"Sketch",167:"Triple Kick",168:"Thief",169:"Spider Web",
    170:"Mind Reader",171:"Nightmare",172:"Flame Wheel",173:"Snore",174:"Curse",
    175:"Flail",176:"Conversion 2",177:"Aeroblast",178:"Cotton Spore",179:"Reversal",
    180:"Spite",181:"Powder Snow",182:"Protect",183:"Mach Punch",184:"Scary Face",
    185:"Feint Attack",186:"Sweet Kiss",187:"Belly Drum",188:"Sludge Bomb",
    189:"Mud-Slap",190:"Octazooka",191:"Spikes",192:"Zap Cannon",193:"Foresight",
    194:"Destiny Bond",195:"Perish Song",196:"Icy Wind",197:"Detect",198:"Bone Rush",
    199:"Lock-On",200:"Outrage",201:"Sandstorm",202:"Giga Drain",203:"Endure",
    204:"Charm",205:"Rollout",206:"False Swipe",207:"Swagger",208:"Milk Drink",
    209:"Spark",210:"Fury Cutter",211:"Steel Wing",212:"Mean Look",213:"Attract",
    214:"Sleep Talk",215:"Heal Bell",216:"Return",217:"Present",218:"Frustration",
    219:"Safeguard",220:"Pain Split",221:"Sacred Fire",222:"Magnitude",223:"Dynamic Punch",
    224:"Megahorn",225:"Dragon Breath",226:"Baton Pass",227:"Encore",228:"Pursuit",
    229:"Rapid Spin",230:"Sweet Scent",231:"Iron Tail",232:"Metal Claw",233:"Vital Throw",
    234:"Morning Sun",235:"Synthesis",236:"Moonlight",237:"Hidden Power",238:"Cross Chop",
    239:"Twister",240:"Rain Dance",241:"Sunny Day",242:"Crunch",243:"Mirror Coat",
    244:"Psych Up",245:"Extreme Speed",246:"Ancient Power",247:"Shadow Ball",
    248:"Future Sight",249:"Rock Smash",250:"Whirlpool",251:"Beat Up",252:"Fake Out",
    253:"Uproar",254:"Stockpile",255:"Spit Up",256:"Swallow",257:"Heat Wave",
    258:"Hail",259:"Torment",260:"Flatter",261:"Will-O-Wisp",262:"Memento",
    263:"Facade",264:"Focus Punch",265:"Smelling Salts",266:"Follow Me",267:"Nature Power",
    268:"Charge",269:"Taunt",270:"Helping Hand",271:"Trick",272:"Role Play",
    273:"Wish",274:"Assist",275:"Ingrain",276:"Superpower",277:"Magic Coat",
    278:"Recycle",279:"Revenge",280:"Brick Break",281:"Yawn",282:"Knock Off",
    283:"Endeavor",284:"Eruption",285:"Skill Swap",286:"Imprison",287:"Refresh",
    288:"Grudge",289:"Snatch",290:"Secret Power",291:"Dive",292:"Arm Thrust",
    293:"Camouflage",294:"Tail Glow",295:"Luster Purge",296:"Mist Ball",
    297:"Feather Dance",298:"Teeter Dance",299:"Blaze Kick",300:"Mud Sport",
    301:"Ice Ball",302:"Needle Arm",303:"Slack Off",304:"Hyper Voice",305:"Poison Fang",
    306:"Crush Claw",307:"Blast Burn",308:"Hydro Cannon",309:"Meteor Mash",
    310:"Astonish",311:"Weather Ball",312:"Aromatherapy",313:"Fake Tears",
    314:"Air Cutter",315:"Overheat",316:"Odor Sleuth",317:"Rock Tomb",
    318:"Silver Wind",319:"Metal Sound",320:"Grass Whistle",321:"Tickle",
    322:"Cosmic Power",323:"Water Spout",324:"Signal Beam",325:"Shadow Punch",
    326:"Extrasensory",327:"Sky Uppercut",328:"Sand Tomb",329:"Sheer Cold",
    330:"Muddy Water",331:"Bullet Seed",332:"Aerial Ace",333:"Icicle Spear",
    334:"Iron Defense",335:"Block",336:"Howl",337:"Dragon Claw",338:"Frenzy Plant",
    339:"Bulk Up",340:"Bounce",341:"Mud Shot",342:"Poison Tail",343:"Covet",
    344:"Volt Tackle",345:"Magical Leaf",346:"Water Sport",347:"Calm Mind",
    348:"Leaf Blade",349:"Dragon Dance",350:"Rock Blast",351:"Shock Wave",
    352:"Water Pulse",353:"Doom Desire",354:"Psycho Boost",
    355:"Roost",356:"Gravity",357:"Miracle Eye",358:"Wake-Up Slap",359:"Hammer Arm",
    360:"Gyro Ball",361:"Healing Wish",362:"Brine",363:"Natural Gift",364:"Feint",
    365:"Pluck",366:"Tailwind",367:"Acupressure",368:"Metal Burst",369:"U-turn",
    370:"Close Combat",371:"Payback",372:"Assurance",373:"Embargo",374:"Fling",
    375:"Psycho Shift",376:"Trump Card",377:"Heal Block",378:"Wring Out",
    379:"Power Trick",380:"Gastro Acid",381:"Lucky Chant",382:"Me First",
    383:"Copycat",384:"Power Swap",385:"Guard Swap",386:"Punishment",
    387:"Last Resort",388:"Worry Seed",389:"Sucker Punch",390:"Toxic Spikes",
    391:"Heart Swap",392:"Aqua Ring",393:"Magnet Rise",394:"Flare Blitz",
    395:"Force Palm",396:"Aura Sphere",397:"Rock Polish",398:"Poison Jab",
    399:"Dark Pulse",400:"Night Slash",401:"Aqua Tail",402:"Seed Bomb",
    403:"Air Slash",404:"X-Scissor",405:"Bug Buzz",406:"Dragon Pulse",
    407:"Dragon Rush",408:"Power Gem",409:"Drain Punch",410:"Vacuum Wave",
    411:"Focus Blast",412:"Energy Ball",413:"Brave Bird",414:"Earth Power",
    415:"Switcheroo",416:"Giga Impact",417:"Nasty Plot",418:"Bullet Punch",
    419:"Avalanche",420:"Ice Shard",421:"Shadow Claw",422:"Thunder Fang",
    423:"Ice Fang",424:"Fire Fang",425:"Shadow Sneak",426:"Mud Bomb",
    427:"Psycho Cut",428:"Zen Headbutt",429:"Mirror Shot",430:"Flash Cannon",
    431:"Rock Climb",432:"Defog",433:"Trick Room",434:"Draco Meteor",
    435:"Discharge",436:"Lava Plume",437:"Leaf Storm",438:"Power Whip",
    439:"Rock Wrecker",440:"Cross Poison",441:"Gunk Shot",442:"Iron Head",
    443:"Magnet Bomb",444:"Stone Edge",445:"Captivate",446:"Stealth Rock",
    447:"Grass Knot",448:"Chatter",449:"Judgment",450:"Bug Bite",
    451:"Charge Beam",452:"Wood Hammer",453:"Aqua Jet",454:"Attack Order",
    455:"Defend Order",456:"Heal Order",457:"Head Smash",458:"Double Hit",
    459:"Roar of Time",460:"Spacial Rend",461:"Lunar Dance",462:"Crush Grip",
    463:"Magma Storm",464:"Dark Void",465:"Seed Flare",466:"Ominous Wind",
    467:"Shadow Force",
}

# ── Abilities (1-233) ─────────────────────────────────────────────────────────
ABILITY_NAMES: Dict[int, str] = {
    0:"None",1:"Stench",2:"Drizzle",3:"Speed Boost",4:"Battle Armor",5:"Sturdy",
    6:"Damp",7:"Limber",8:"Sand Veil",9:"Static",10:"Volt Absorb",
    11:"Water Absorb",12:"Oblivious",13:"Cloud Nine",14:"Compound Eyes",
    15:"Insomnia",16:"Color Change",17:"Immunity",18:"Flash Fire",
    19:"Shield Dust",20:"Own Tempo",21:"Suction Cups",22:"Intimidate",
    23:"Shadow Tag",24:"Rough Skin",25:"Wonder Guard",26:"Levitate",
    27:"Effect Spore",28:"Synchronize",29:"Clear Body",30:"Natural Cure",
    31:"Lightning Rod",32:"Serene Grace",33:"Swift Swim",34:"Chlorophyll",
    35:"Illuminate",36:"Trace",37:"Huge Power",38:"Poison Point",39:"Inner Focus",
    40:"Magma Armor",41:"Water Veil",42:"Magnet Pull",43:"Soundproof",
    44:"Rain Dish",45:"Sand Stream",46:"Pressure",47:"Thick Fat",48:"Early Bird",
    49:"Flame Body",50:"Run Away",51:"Keen Eye",52:"Hyper Cutter",53:"Pickup",
    54:"Truant",55:"Hustle",56:"Cute Charm",57:"Plus",58:"Minus",59:"Forecast",
    60:"Sticky Hold",61:"Shed Skin",62:"Guts",63:"Marvel Scale",64:"Liquid Ooze",
    65:"Overgrow",66:"Blaze",67:"Torrent",68:"Swarm",69:"Rock Head",70:"Drought",
    71:"Arena Trap",72:"Vital Spirit",73:"White Smoke",74:"Pure Power",
    75:"Shell Armor",76:"Air Lock",77:"Tangled Feet",78:"Motor Drive",
    79:"Rivalry",80:"Steadfast",81:"Snow Cloak",82:"Gluttony",83:"Anger Point",
    84:"Unburden",85:"Heatproof",86:"Simple",87:"Dry Skin",88:"Download",
    89:"Iron Fist",90:"Poison Heal",91:"Adaptability",92:"Skill Link",
    93:"Hydration",94:"Solar Power",95:"Quick Feet",96:"Normalize",97:"Sniper",
    98:"Magic Guard",99:"No Guard",100:"Stall",101:"Technician",102:"Leaf Guard",
    103:"Klutz",104:"Mold Breaker",105:"Super Luck",106:"Aftermath",
    107:"Anticipation",108:"Forewarn",109:"Unaware",110:"Tinted Lens",
    111:"Filter",112:"Slow Start",113:"Scrappy",114:"Storm Drain",115:"Ice Body",
    116:"Solid Rock",117:"Snow Warning",118:"Honey Gather",119:"Frisk",
    120:"Reckless",121:"Multitype",122:"Flower Gift",123:"Bad Dreams",
    124:"Pickpocket",125:"Sheer Force",126:"Contrary",127:"Unnerve",
    128:"Defiant",129:"Defeatist",130:"Cursed Body",131:"Healer",
    132:"Friend Guard",133:"Weak Armor",134:"Heavy Metal",135:"Light Metal",
    136:"Multiscale",137:"Toxic Boost",138:"Flare Boost",139:"Harvest",
    140:"Telepathy",141:"Moody",142:"Overcoat",143:"Poison Touch",
    144:"Regenerator",145:"Big Pecks",146:"Sand Rush",147:"Wonder Skin",
    148:"Analytic",149:"Illusion",150:"Imposter",151:"Infiltrator",152:"Mummy",
    153:"Moxie",154:"Justified",155:"Rattled",156:"Magic Bounce",
    157:"Sap Sipper",158:"Prankster",159:"Sand Force",160:"Iron Barbs",
    161:"Zen Mode",162:"Victory Star",163:"Turboblaze",164:"Teravolt",
    165:"Aroma Veil",166:"Flower Veil",167:"Cheek Pouch",168:"Protean",
    169:"Fur Coat",170:"Magician",171:"Bulletproof",172:"Competitive",
    173:"Strong Jaw",174:"Refrigerate",175:"Sweet Veil",176:"Stance Change",
    177:"Gale Wings",178:"Mega Launcher",179:"Grass Pelt",180:"Symbiosis",
    181:"Tough Claws",182:"Pixilate",183:"Gooey",184:"Aerilate",
    185:"Parental Bond",186:"Dark Aura",187:"Fairy Aura",188:"Aura Break",
    189:"Primordial Sea",190:"Desolate Land",191:"Delta Stream",192:"Stamina",
    193:"Wimp Out",194:"Emergency Exit",195:"Water Compaction",196:"Merciless",
    197:"Shields Down",198:"Stakeout",199:"Water Bubble",200:"Steelworker",
    201:"Berserk",202:"Slush Rush",203:"Long Reach",204:"Liquid Voice",
    205:"Triage",206:"Galvanize",207:"Surge Surfer",208:"Schooling",
    209:"Disguise",210:"Battle Bond",211:"Power Construct",212:"Corrosion",
    213:"Comatose",214:"Queenly Majesty",215:"Innards Out",216:"Dancer",
    217:"Battery",218:"Fluffy",219:"Dazzling",220:"Soul-Heart",
    221:"Tangling Hair",222:"Receiver",223:"Power of Alchemy",224:"Beast Boost",
    225:"RKS System",226:"Electric Surge",227:"Psychic Surge",228:"Misty Surge",
    229:"Grassy Surge",230:"Full Metal Body",231:"Shadow Shield",
    232:"Prism Armor",233:"Neuroforce",
}

# ── Game versions ─────────────────────────────────────────────────────────────
VERSION_NAMES: Dict[int, str] = {
    24:"X",25:"Y",26:"Alpha Sapphire",27:"Omega Ruby",
    30:"Sun",31:"Moon",32:"Ultra Sun",33:"Ultra Moon",34:"GO",
    42:"Let's Go, Pikachu!",43:"Let's Go, Eevee!",
    44:"Sword",45:"Shield",47:"Legends: Arceus",
    48:"Brilliant Diamond",49:"Shining Pearl",
    50:"Scarlet",51:"Violet",
}


def species_name(species_id: int) -> str:
    return SPECIES_NAMES.get(species_id, f"Species #{species_id}")


def move_name(move_id: int) -> str:
    return MOVE_NAMES.get(move_id, f"Move #{move_id}")


def ability_name(ability_id: int) -> str:
    return ABILITY_NAMES.get(ability_id, f"Ability #{ability_id}")


def version_name(version_id: int) -> str:
    return VERSION_NAMES.get(version_id, f"Version #{version_id}")
