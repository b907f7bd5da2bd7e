from islamic_data import IngestionSettings, IslamicData

print(IslamicData.__version__)  # 0.1.0

# Default Usage: writes into ./data/islamic, one request at a time
data = IslamicData()

# Download every dataset family (Quran, Hadith, Tafsir, Dua & Dhikr, HadithMV)
results = data.seed()
print(results["hadith"]["collections"].succeeded)

# Only refresh the HadithMV books and read their manifest
data.seed(families=["hadithmv"])
print(data.manifest()["totalBooks"])

# Files that are available locally
print(data.available())
# => ['dua-categories.json', 'duas-dhikr-complete.json', 'hadith-abudawud-english.json', ...]

bukhari = data.load("hadith-bukhari-english.json")
print(len(bukhari["hadiths"]))

# Custom directory, four parallel downloads and three attempts on network errors
fast = IslamicData(
    "/tmp/islamic",
    settings=IngestionSettings(max_concurrency=4, max_attempts=3, timeout=60),
)
fast.seed(families=["quran", "tafsir"])

# Log what would be downloaded without touching the network
fast.seed(dry_run=True)
