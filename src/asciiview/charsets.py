# Lightest to darkest
DEFAULT_RAMP = " .,:;i1tfLCG08@"

# Braille dot rotation used by the download spinner
SPINNER_FRAMES = "⢿⣻⣽⣾⣷⣯⣟⡿"

# Syllable alphabet for cache file names
CONSONANTS = "bcdfghjklmnpqrstvwxzy"
VOWELS = "aeiou"
