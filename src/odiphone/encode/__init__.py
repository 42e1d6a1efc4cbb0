from odiphone.encode.encoder import ODIphone, default_encoder, encode
from odiphone.encode.tokens import Token, TokenKind

__all__ = ["ODIphone", "Token", "TokenKind", "default_encoder", "encode"]
