"""odiphone: phonetic keys for indexing Odia words by pronunciation.

Each word yields three Romanized keys of increasing phonetic specificity,
for spelling-tolerant search, word suggestion and deduplication.
"""

from odiphone.encode.encoder import ODIphone, encode

__all__ = ["ODIphone", "encode"]
__version__ = "0.1.0"
