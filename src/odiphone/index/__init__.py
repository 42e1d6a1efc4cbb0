from odiphone.index.models import EncodedWord, KeyLevel
from odiphone.index.phonetic_index import PhoneticIndex

__all__ = ["EncodedWord", "KeyLevel", "PhoneticIndex"]
