"""
Closed word lists and rules used for lexical classification.

Every list is an immutable module-level constant. New categories are added as
another frozenset here, never by mutating an existing one at runtime.
"""
import re

# Core grammar stopwords: articles, prepositions, pronouns, auxiliaries, fillers
STOPWORDS = frozenset({
    # Articles & determiners
    "a", "an", "the", "this", "that", "these", "those",
    # Prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "down",
    "about", "into", "through", "during", "before", "after", "above", "below",
    "between", "under", "over", "out", "off", "against", "along", "around",
    # Conjunctions
    "and", "or", "but", "nor", "so", "yet", "both", "either", "neither",
    "if", "because", "while", "although", "though", "unless", "since",
    # Pronouns
    "i", "me", "my", "myself", "you", "your", "yours", "yourself", "he", "him",
    "his", "himself", "she", "her", "hers", "herself", "it", "its", "itself",
    "we", "us", "our", "ours", "ourselves", "they", "them", "their", "theirs",
    "themselves", "who", "whom", "whose", "which", "what", "whoever", "whatever",
    # Auxiliaries and modals
    "is", "am", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "having", "do", "does", "did", "doing",
    "will", "would", "could", "should", "may", "might", "must", "shall", "can",
    "ought",
    # Adverbs & modifiers
    "very", "just", "only", "also", "even", "still", "already", "always",
    "never", "ever", "often", "sometimes", "usually", "probably", "maybe",
    "perhaps", "certainly", "definitely", "actually", "really", "basically",
    "simply", "quite", "rather", "almost", "nearly", "hardly", "barely",
    "however", "therefore", "thus", "hence", "otherwise", "well", "enough",
    # Question words
    "how", "why", "when", "where", "whether",
    # Misc common words
    "here", "there", "now", "then", "today", "tomorrow", "yesterday", "tonight",
    "again", "further", "once", "each", "every", "all", "any", "some", "many",
    "much", "few", "fewer", "more", "most", "less", "least", "other", "another",
    "such", "no", "not", "than", "too", "same", "own", "able", "else", "via",
    # Interjections and colloquialisms
    "thanks", "thank", "please", "sorry", "hello", "hi", "hey", "bye",
    "yeah", "yes", "ok", "okay", "oh", "ah", "um", "uh", "hmm",
    "gonna", "wanna", "gotta", "kinda", "sorta",
    # Numbers written in words
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "second", "third", "fourth", "fifth",
    # Tech/URL artifacts
    "www", "http", "https", "com", "org", "net", "html", "htm", "php", "asp",
})

# Verbs (base and common inflected forms) that carry no topical meaning
VERB_STOPWORDS = frozenset({
    "meet", "meets", "met", "meeting",
    "show", "shows", "showed", "shown", "showing",
    "play", "plays", "played", "playing",
    "perform", "performs", "performed", "performing",
    "sing", "sings", "sang", "sung", "singing",
    "dance", "dances", "danced", "dancing",
    "try", "tries", "tried", "trying",
    "start", "starts", "started", "starting",
    "end", "ends", "ended", "ending",
    "win", "wins", "won", "winning",
    "lose", "loses", "lost", "losing",
    "beat", "beats", "beating",
    "create", "creates", "created", "creating",
    "make", "makes", "made", "making",
    "become", "becomes", "became", "becoming",
    "reveal", "reveals", "revealed", "revealing",
    "react", "reacts", "reacted", "reacting",
    "respond", "responds", "responded", "responding",
    "return", "returns", "returned", "returning",
    "join", "joins", "joined", "joining",
    "leave", "leaves", "left", "leaving",
    "bring", "brings", "brought", "bringing",
    "break", "breaks", "broke", "broken", "breaking",
    "fix", "fixes", "fixed", "fixing",
    "open", "opens", "opened", "opening",
    "close", "closes", "closed", "closing",
    "run", "runs", "ran", "running",
    "walk", "walks", "walked", "walking",
    "go", "goes", "went", "gone", "going",
    "come", "comes", "came", "coming",
    "talk", "talks", "talked", "talking",
    "speak", "speaks", "spoke", "spoken", "speaking",
    "say", "says", "said", "saying",
    "tell", "tells", "told", "telling",
    "explain", "explains", "explained", "explaining",
    "discuss", "discusses", "discussed", "discussing",
    "see", "sees", "saw", "seen", "seeing",
    "look", "looks", "looked", "looking",
    "watch", "watches", "watched", "watching",
    "hear", "hears", "heard", "hearing",
    "listen", "listens", "listened", "listening",
    "think", "thinks", "thought", "thinking",
    "know", "knows", "knew", "known", "knowing",
    "believe", "believes", "believed", "believing",
    "want", "wants", "wanted", "wanting",
    "need", "needs", "needed", "needing",
    "like", "likes", "liked", "liking",
    "love", "loves", "loved", "loving",
    "hate", "hates", "hated", "hating",
    "get", "gets", "got", "gotten", "getting",
    "give", "gives", "gave", "given", "giving",
    "take", "takes", "took", "taken", "taking",
    "put", "puts", "putting",
    "find", "finds", "found", "finding",
    "keep", "keeps", "kept", "keeping",
    "let", "lets", "letting",
    "help", "helps", "helped", "helping",
    "turn", "turns", "turned", "turning",
    "move", "moves", "moved", "moving",
    "stop", "stops", "stopped", "stopping",
    "change", "changes", "changed", "changing",
    "follow", "follows", "followed", "following",
    "ask", "asks", "asked", "asking",
    "use", "uses", "used", "using",
    "call", "calls", "called", "calling",
    "feel", "feels", "felt", "feeling",
    "seem", "seems", "seemed", "seeming",
    "mean", "means", "meant", "meaning",
    "set", "sets", "setting",
    "read", "reads", "reading",
    "learn", "learns", "learned", "learning",
    "build", "builds", "built", "building",
    "send", "sends", "sent", "sending",
    "hold", "holds", "held", "holding",
    "stand", "stands", "stood", "standing",
    "sit", "sits", "sat", "sitting",
    "wait", "waits", "waited", "waiting",
    "work", "works", "worked", "working",
    "happen", "happens", "happened", "happening",
    "include", "includes", "included", "including",
    "continue", "continues", "continued", "continuing",
    "drop", "drops", "dropped", "dropping",
    "kill", "kills", "killed", "killing",
    "destroy", "destroys", "destroyed", "destroying",
    "begin", "begins", "began", "beginning",
    "write", "writes", "wrote", "written",
    "provide", "provides", "provided", "providing",
    "pay", "pays", "paid", "paying",
    "spend", "spends", "spent", "spending",
    "buy", "buys", "bought", "buying",
    "stay", "stays", "stayed", "staying",
    "remember", "remembers", "remembered", "remembering",
})

# Weak or vague descriptors
ADJECTIVE_STOPWORDS = frozenset({
    # Quality/value
    "good", "bad", "best", "worst", "better", "worse",
    "great", "greatest", "amazing", "awesome", "incredible", "unbelievable",
    "perfect", "excellent", "wonderful", "fantastic", "terrible", "horrible",
    "beautiful", "ugly", "pretty", "nice", "cool", "hot", "cold",
    # Intensity
    "big", "small", "huge", "tiny", "little", "giant", "massive", "enormous",
    "large", "bigger", "biggest", "smaller", "smallest",
    # Superlatives
    "ultimate", "final", "first", "last", "top", "bottom", "next",
    "extreme", "insane", "crazy", "wild", "epic", "legendary",
    "super", "mega", "ultra", "classic",
    # Emotional
    "happy", "sad", "angry", "mad", "scared", "scary", "funny", "hilarious",
    "weird", "strange", "odd", "creepy", "shocking", "surprising",
    # State
    "new", "old", "young", "ancient", "modern", "fresh", "latest", "newest", "oldest",
    "real", "fake", "true", "false", "right", "wrong",
    "live", "dead", "alive",
    "full", "empty", "complete", "total", "whole", "entire",
    "fast", "slow", "quick", "rapid", "fastest",
    "hard", "soft", "easy", "difficult", "simple", "complex",
    "high", "low", "deep", "shallow", "long", "short", "tall",
    "dark", "light", "bright", "dim",
    # Uniqueness
    "special", "unique", "rare", "common", "normal", "regular",
    "secret", "hidden", "exclusive", "private", "public",
    "different", "similar", "main", "major", "minor",
    "specific", "general", "certain", "sure", "clear", "likely",
    "recent", "current", "previous",
    # Moral
    "evil", "wicked", "cruel", "kind", "gentle", "sweet",
    # Misc
    "important", "famous", "popular", "rich", "poor", "free", "cheap", "expensive",
    "early", "late", "ready", "possible", "impossible", "available",
})

# Media-title filler and platform names
VIDEO_JUNK_WORDS = frozenset({
    # Media types
    "video", "videos", "clip", "clips", "scene", "scenes",
    "music", "audio", "sound", "sounds",
    "movie", "movies", "film", "films", "show", "shows",
    # Quality indicators
    "hd", "hq", "sd", "4k", "1080p", "720p", "480p", "360p",
    # Versions
    "official", "original", "extended", "version", "versions",
    "remix", "remixed", "remaster", "remastered",
    "cover", "covers", "acoustic", "instrumental",
    # Content types
    "visualizer", "lyric", "lyrics", "karaoke",
    "trailer", "trailers", "teaser", "teasers", "promo",
    "reaction", "reactions", "review", "reviews", "unboxing",
    "tutorial", "tutorials", "guide", "guides", "howto", "how-to",
    "compilation", "compilations", "montage", "montages",
    "highlight", "highlights", "best", "moments", "moment",
    "vlog", "vlogs", "blog", "podcast", "podcasts",
    "stream", "streams", "streaming", "livestream",
    # Series indicators
    "episode", "episodes", "season", "seasons", "part", "parts",
    "chapter", "chapters", "series",
    # Credits
    "feat", "featuring", "ft", "prod", "produced", "directed", "by",
    # Platforms
    "youtube", "tiktok", "instagram", "twitter", "facebook",
    "spotify", "soundcloud", "vevo",
    # Calls to action
    "subscribe", "like", "comment", "share", "click", "watch",
    "notification", "bell", "channel",
})

# Generic URL path segments
URL_PATH_JUNK_WORDS = frozenset({
    # Video/content paths
    "watch", "shorts", "embed", "e", "v", "p", "c",
    # Social media paths
    "post", "posts", "status", "statuses", "tweet", "tweets",
    "reel", "reels", "stories", "story", "feed",
    "photo", "photos", "pic", "pics", "image", "images",
    # Content organization
    "article", "articles", "blog", "blogs", "news", "item", "items",
    "page", "pages", "view", "detail", "details", "content",
    # Navigation
    "home", "index", "main", "default", "about", "contact",
    "search", "results", "query", "browse", "explore", "discover",
    # User paths
    "user", "users", "profile", "profiles", "account", "accounts",
    "channel", "channels", "creator", "author",
    # Documents
    "docs", "doc", "document", "documents", "file", "files",
    "download", "downloads", "upload", "uploads",
    # API/technical
    "api", "data", "json", "xml", "rss",
    # Misc
    "link", "links", "url", "share", "redirect", "goto", "go",
    "site", "website", "web", "online", "internet", "en", "us",
    # Camera and screenshot file-name prefixes
    "img", "dsc", "pxl", "screenshot", "scan",
})

# Vague nouns: never a tag on their own, also ignored by phrase extraction
VAGUE_WORDS = frozenset({
    "thing", "things", "stuff", "something", "anything", "nothing", "everything",
    "someone", "anyone", "everyone", "nobody", "everybody", "people", "person",
    "way", "ways", "place", "places", "time", "times",
    "day", "days", "year", "years", "week", "weeks", "month", "months",
    "morning", "evening", "night", "afternoon",
    "case", "cases", "fact", "facts", "point", "points", "number", "numbers",
    "sort", "sorts", "type", "types", "example", "examples",
    "lot", "lots", "bit", "bits", "piece", "pieces",
    "side", "sides", "area", "areas", "line", "lines",
    "result", "reason", "idea", "question", "problem", "issue", "matter",
    "back", "etc",
})

# Weak words: fine inside a phrase ("queen elizabeth"), weak alone
WEAK_WORDS = frozenset({
    "man", "woman", "men", "women", "guy", "guys", "girl", "boy", "child", "children",
    "king", "queen", "prince", "princess", "lord", "lady",
    "dr", "mr", "mrs", "ms", "miss", "sir", "madam", "mt", "st",
})

# Connectors allowed in the middle of a trigram ("bread and butter")
CONNECTOR_WORDS = frozenset({"of", "and", "for", "in", "on", "with"})

# -ing words that denote activities; overrides the verb list
ACTIVITY_NOUNS = frozenset({
    "boxing", "cooking", "fishing", "gaming", "hiking", "skiing", "surfing",
    "swimming", "wrestling", "dancing", "singing", "acting", "racing",
    "programming", "engineering", "marketing", "building", "training",
    "baking", "gardening", "painting", "drawing", "writing", "climbing",
    "cycling", "running", "camping", "knitting", "woodworking", "budgeting",
    "investing", "journaling", "sailing", "skating", "snowboarding",
})

# Words that end in a non-noun suffix but are usually nouns
NOUN_SUFFIX_EXCEPTIONS = frozenset({
    "animal", "capital", "hospital", "festival", "material", "metal",
    "digital", "criminal", "journal", "signal", "rival", "manual",
    "professional", "personal", "portal", "tropical", "musical",
})

# Noun-forming suffixes
NOUN_SUFFIX_PATTERNS = tuple(re.compile(p) for p in (
    r"er$",    # player, writer
    r"or$",    # actor, editor
    r"ist$",   # artist, scientist
    r"ism$",   # journalism
    r"ity$",   # community, productivity
    r"ness$",  # fitness
    r"ment$",  # entertainment
    r"tion$",  # nation, collection
    r"sion$",  # television
    r"ance$",  # performance
    r"ence$",  # science
    r"dom$",   # kingdom
    r"ship$",  # championship
    r"hood$",  # neighborhood
    r"ure$",   # culture, nature
    r"ery$",   # gallery, discovery
    r"ics$",   # physics, economics
    r"ogy$",   # technology
    r"phy$",   # photography
))

# Suffixes of verbs, adjectives and adverbs
NON_NOUN_SUFFIX_PATTERNS = tuple(re.compile(p) for p in (
    r"ing$",   # gerunds
    r"ly$",    # adverbs
    r"ed$",    # past tense
    r"est$",   # superlatives
    r"ful$",
    r"less$",
    r"able$",
    r"ible$",
    r"ive$",
    r"ous$",
    r"al$",
))

# Broad content categories detected by closed patterns.
# Labels that collide with the junk lists (music, movies, news) are left out.
CATEGORY_PATTERNS = tuple((re.compile(p, re.IGNORECASE), cat) for p, cat in (
    (r"\b(basketball|nba|wnba)\b", "basketball"),
    (r"\b(football|nfl|super bowl|touchdown|quarterback)\b", "football"),
    (r"\b(soccer|fifa|premier league|champions league|world cup)\b", "soccer"),
    (r"\b(baseball|mlb|home run|pitcher)\b", "baseball"),
    (r"\b(hockey|nhl|puck|goalie)\b", "hockey"),
    (r"\b(tennis|wimbledon|roland garros)\b", "tennis"),
    (r"\b(golf|pga)\b", "golf"),
    (r"\b(boxing|ufc|mma|wrestling|wwe)\b", "combat sports"),
    (r"\b(recipe|recipes|cooking|chef|kitchen|ingredients?|cuisine|restaurant)\b", "cooking"),
    (r"\b(bake|baking|roast|grill|simmer)\b", "cooking"),
    (r"\b(programming|coding|developer|software|algorithm)\b", "programming"),
    (r"\b(javascript|python|typescript|golang|rust|java)\b", "programming"),
    (r"\b(iphone|android|ios|smartphone|tablet)\b", "mobile"),
    (r"\b(artificial intelligence|machine learning|deep learning|neural network|llm)\b",
     "artificial intelligence"),
    (r"\b(crypto|bitcoin|ethereum|blockchain|nft|defi|web3)\b", "crypto"),
    (r"\b(netflix|hulu|hbo|sitcom)\b", "television"),
    (r"\b(gaming|gamer|playstation|xbox|nintendo|esports)\b", "gaming"),
    (r"\b(anime|manga|otaku|cosplay)\b", "anime"),
    (r"\b(course|lesson|education|school|university|college|degree)\b", "education"),
    (r"\b(science|physics|chemistry|biology|mathematics)\b", "science"),
    (r"\b(history|historical|medieval)\b", "history"),
    (r"\b(workout|exercise|fitness|gym|nutrition)\b", "fitness"),
    (r"\b(yoga|meditation|mindfulness|mental health|therapy)\b", "wellness"),
    (r"\b(medicine|medical|doctor|hospital|symptoms?|diagnosis)\b", "health"),
    (r"\b(business|startup|entrepreneur|company|investor)\b", "business"),
    (r"\b(stocks?|investing|finance|trading|economy|wealth)\b", "finance"),
    (r"\b(marketing|advertising|branding|seo)\b", "marketing"),
    (r"\b(fashion|clothing|outfit)\b", "fashion"),
    (r"\b(travel|vacation|trip|tourism|hotel|flight)\b", "travel"),
    (r"\b(photography|photographer|camera|portrait|landscape)\b", "photography"),
    (r"\b(painting|drawing|sculpture|gallery|museum)\b", "art"),
    (r"\b(diy|crafts|handmade)\b", "crafts"),
    (r"\b(politics|political|election|government|congress|senate)\b", "politics"),
))

# Known platforms: registrable domain label -> tag name
PLATFORM_TAGS = {
    "youtube": "youtube",
    "youtu": "youtube",
    "github": "github",
    "gitlab": "gitlab",
    "stackoverflow": "stack overflow",
    "medium": "medium",
    "twitter": "twitter",
    "x": "twitter",
    "linkedin": "linkedin",
    "reddit": "reddit",
    "instagram": "instagram",
    "tiktok": "tiktok",
    "pinterest": "pinterest",
    "spotify": "spotify",
    "soundcloud": "soundcloud",
    "twitch": "twitch",
    "vimeo": "vimeo",
    "dribbble": "dribbble",
    "behance": "behance",
    "figma": "figma",
    "notion": "notion",
    "amazon": "amazon",
    "netflix": "netflix",
    "wikipedia": "wikipedia",
    "imdb": "imdb",
    "espn": "espn",
}

# Second-level labels that form public suffixes under a country code (bbc.co.uk)
SECOND_LEVEL_SUFFIXES = frozenset({"co", "com", "org", "net", "ac", "gov", "edu", "ne", "or"})

# Title separators denoting "artist - track" style titles
TITLE_SEPARATOR_RE = re.compile(r"\s+[-–—]\s+|\s*\|\s*|\s+//\s+|\s+·\s+")
TITLE_BRACKET_RE = re.compile(r"\(([^()]*)\)|\[([^\[\]]*)\]|\{([^{}]*)\}")
