"""Bundled emoji catalog.

A snapshot of the gitmoji set, used until `gittr update` has cached a
fresher copy in ~/.gittr/emojis.json.
"""

BUNDLED_EMOJIS = [
    {"emoji": "🎨", "code": ":art:", "name": "art", "description": "Improve structure / format of the code."},
    {"emoji": "⚡️", "code": ":zap:", "name": "zap", "description": "Improve performance."},
    {"emoji": "🔥", "code": ":fire:", "name": "fire", "description": "Remove code or files."},
    {"emoji": "🐛", "code": ":bug:", "name": "bug", "description": "Fix a bug."},
    {"emoji": "🚑️", "code": ":ambulance:", "name": "ambulance", "description": "Critical hotfix."},
    {"emoji": "✨", "code": ":sparkles:", "name": "sparkles", "description": "Introduce new features."},
    {"emoji": "📝", "code": ":memo:", "name": "memo", "description": "Add or update documentation."},
    {"emoji": "🚀", "code": ":rocket:", "name": "rocket", "description": "Deploy stuff."},
    {"emoji": "💄", "code": ":lipstick:", "name": "lipstick", "description": "Add or update the UI and style files."},
    {"emoji": "🎉", "code": ":tada:", "name": "tada", "description": "Begin a project."},
    {"emoji": "✅", "code": ":white_check_mark:", "name": "white-check-mark", "description": "Add, update, or pass tests."},
    {"emoji": "🔒️", "code": ":lock:", "name": "lock", "description": "Fix security or privacy issues."},
    {"emoji": "🔐", "code": ":closed_lock_with_key:", "name": "closed-lock-with-key", "description": "Add or update secrets."},
    {"emoji": "🔖", "code": ":bookmark:", "name": "bookmark", "description": "Release / Version tags."},
    {"emoji": "🚨", "code": ":rotating_light:", "name": "rotating-light", "description": "Fix compiler / linter warnings."},
    {"emoji": "🚧", "code": ":construction:", "name": "construction", "description": "Work in progress."},
    {"emoji": "💚", "code": ":green_heart:", "name": "green-heart", "description": "Fix CI Build."},
    {"emoji": "⬇️", "code": ":arrow_down:", "name": "arrow-down", "description": "Downgrade dependencies."},
    {"emoji": "⬆️", "code": ":arrow_up:", "name": "arrow-up", "description": "Upgrade dependencies."},
    {"emoji": "📌", "code": ":pushpin:", "name": "pushpin", "description": "Pin dependencies to specific versions."},
    {"emoji": "👷", "code": ":construction_worker:", "name": "construction-worker", "description": "Add or update CI build system."},
    {"emoji": "📈", "code": ":chart_with_upwards_trend:", "name": "chart-with-upwards-trend", "description": "Add or update analytics or track code."},
    {"emoji": "♻️", "code": ":recycle:", "name": "recycle", "description": "Refactor code."},
    {"emoji": "➕", "code": ":heavy_plus_sign:", "name": "heavy-plus-sign", "description": "Add a dependency."},
    {"emoji": "➖", "code": ":heavy_minus_sign:", "name": "heavy-minus-sign", "description": "Remove a dependency."},
    {"emoji": "🔧", "code": ":wrench:", "name": "wrench", "description": "Add or update configuration files."},
    {"emoji": "🔨", "code": ":hammer:", "name": "hammer", "description": "Add or update development scripts."},
    {"emoji": "🌐", "code": ":globe_with_meridians:", "name": "globe-with-meridians", "description": "Internationalization and localization."},
    {"emoji": "✏️", "code": ":pencil2:", "name": "pencil2", "description": "Fix typos."},
    {"emoji": "💩", "code": ":poop:", "name": "poop", "description": "Write bad code that needs to be improved."},
    {"emoji": "⏪️", "code": ":rewind:", "name": "rewind", "description": "Revert changes."},
    {"emoji": "🔀", "code": ":twisted_rightwards_arrows:", "name": "twisted-rightwards-arrows", "description": "Merge branches."},
    {"emoji": "📦️", "code": ":package:", "name": "package", "description": "Add or update compiled files or packages."},
    {"emoji": "👽️", "code": ":alien:", "name": "alien", "description": "Update code due to external API changes."},
    {"emoji": "🚚", "code": ":truck:", "name": "truck", "description": "Move or rename resources (e.g.: files, paths, routes)."},
    {"emoji": "📄", "code": ":page_facing_up:", "name": "page-facing-up", "description": "Add or update license."},
    {"emoji": "💥", "code": ":boom:", "name": "boom", "description": "Introduce breaking changes."},
    {"emoji": "🍱", "code": ":bento:", "name": "bento", "description": "Add or update assets."},
    {"emoji": "♿️", "code": ":wheelchair:", "name": "wheelchair", "description": "Improve accessibility."},
    {"emoji": "💡", "code": ":bulb:", "name": "bulb", "description": "Add or update comments in source code."},
    {"emoji": "🍻", "code": ":beers:", "name": "beers", "description": "Write code drunkenly."},
    {"emoji": "💬", "code": ":speech_balloon:", "name": "speech-balloon", "description": "Add or update text and literals."},
    {"emoji": "🗃️", "code": ":card_file_box:", "name": "card-file-box", "description": "Perform database related changes."},
    {"emoji": "🔊", "code": ":loud_sound:", "name": "loud-sound", "description": "Add or update logs."},
    {"emoji": "🔇", "code": ":mute:", "name": "mute", "description": "Remove logs."},
    {"emoji": "👥", "code": ":busts_in_silhouette:", "name": "busts-in-silhouette", "description": "Add or update contributor(s)."},
    {"emoji": "🚸", "code": ":children_crossing:", "name": "children-crossing", "description": "Improve user experience / usability."},
    {"emoji": "🏗️", "code": ":building_construction:", "name": "building-construction", "description": "Make architectural changes."},
    {"emoji": "📱", "code": ":iphone:", "name": "iphone", "description": "Work on responsive design."},
    {"emoji": "🤡", "code": ":clown_face:", "name": "clown-face", "description": "Mock things."},
    {"emoji": "🥚", "code": ":egg:", "name": "egg", "description": "Add or update an easter egg."},
    {"emoji": "🙈", "code": ":see_no_evil:", "name": "see-no-evil", "description": "Add or update a .gitignore file."},
    {"emoji": "📸", "code": ":camera_flash:", "name": "camera-flash", "description": "Add or update snapshots."},
    {"emoji": "⚗️", "code": ":alembic:", "name": "alembic", "description": "Perform experiments."},
    {"emoji": "🔍️", "code": ":mag:", "name": "mag", "description": "Improve SEO."},
    {"emoji": "🏷️", "code": ":label:", "name": "label", "description": "Add or update types."},
    {"emoji": "🌱", "code": ":seedling:", "name": "seedling", "description": "Add or update seed files."},
    {"emoji": "🚩", "code": ":triangular_flag_on_post:", "name": "triangular-flag-on-post", "description": "Add, update, or remove feature flags."},
    {"emoji": "🥅", "code": ":goal_net:", "name": "goal-net", "description": "Catch errors."},
    {"emoji": "💫", "code": ":dizzy:", "name": "dizzy", "description": "Add or update animations and transitions."},
    {"emoji": "🗑️", "code": ":wastebasket:", "name": "wastebasket", "description": "Deprecate code that needs to be cleaned up."},
    {"emoji": "🛂", "code": ":passport_control:", "name": "passport-control", "description": "Work on code related to authorization, roles and permissions."},
    {"emoji": "🩹", "code": ":adhesive_bandage:", "name": "adhesive-bandage", "description": "Simple fix for a non-critical issue."},
    {"emoji": "🧐", "code": ":monocle_face:", "name": "monocle-face", "description": "Data exploration/inspection."},
    {"emoji": "⚰️", "code": ":coffin:", "name": "coffin", "description": "Remove dead code."},
    {"emoji": "🧪", "code": ":test_tube:", "name": "test-tube", "description": "Add a failing test."},
    {"emoji": "👔", "code": ":necktie:", "name": "necktie", "description": "Add or update business logic."},
    {"emoji": "🩺", "code": ":stethoscope:", "name": "stethoscope", "description": "Add or update healthcheck."},
    {"emoji": "🧱", "code": ":bricks:", "name": "bricks", "description": "Infrastructure related changes."},
    {"emoji": "🧑‍💻", "code": ":technologist:", "name": "technologist", "description": "Improve developer experience."},
    {"emoji": "💸", "code": ":money_with_wings:", "name": "money-with-wings", "description": "Add sponsorships or money related infrastructure."},
    {"emoji": "🧵", "code": ":thread:", "name": "thread", "description": "Add or update code related to multithreading or concurrency."},
    {"emoji": "🦺", "code": ":safety_vest:", "name": "safety-vest", "description": "Add or update code related to validation."},
]
