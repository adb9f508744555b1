"""
Helpers for turning matcher names into English phrases.
"""

from typing import Callable


def split_words(name: str) -> str:
  """
  Converts an identifier into the phrase used in descriptions.

  >>> split_words("a_value_within")
  'a value within'
  """
  return name.replace("_", " ")


def replace_phrase(old_name: str, new_name: str) -> Callable[[str], str]:
  """
  Builds a description block substituting one matcher's phrase for another's.

  Args:
      old_name (str): Identifier of the wrapped matcher (e.g. 'be_within').
      new_name (str): Identifier of the alias (e.g. 'a_value_within').

  Returns:
      Callable[[str], str]: Function rewriting every occurrence in a message.
  """
  old_phrase = split_words(old_name)
  new_phrase = split_words(new_name)

  def block(message: str) -> str:
    return message.replace(old_phrase, new_phrase)

  return block
