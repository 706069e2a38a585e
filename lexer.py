from __future__ import annotations

from dataclasses import dataclass, field

from sly import Lexer

KEYWORD = 'kharrej'

RETURN = 'RETURN'
NUMBER = 'NUMBER'
SEMI = 'SEMI'


@dataclass(frozen=True)
class Token:
  kind: str
  text: str | None = None
  lineno: int = field(default=0, compare=False)


class RiaLexer(Lexer):
  ignore = ' \t\r'
  tokens = {RETURN, NUMBER, SEMI}

  NUMBER = r'[0-9]+'
  SEMI = r';'

  # Words start on an ASCII letter and run on through any letter.
  @_(r'[a-zA-Z][^\W\d_]*')
  def RETURN(self, t):
    if t.value == KEYWORD:
      return t

  @_(r'\n+')
  def ignore_newline(self, t):
    self.lineno += t.value.count('\n')

  def error(self, t):
      self.index += 1


def tokenize(source):
  """Split ``source`` into RETURN, NUMBER and SEMI tokens.

  Never fails: whitespace, unknown characters and words other than the
  keyword are dropped without producing a token.
  """
  tokens = []
  for t in RiaLexer().tokenize(source):
    text = t.value if t.type == NUMBER else None
    tokens.append(Token(t.type, text, t.lineno))
  return tokens
