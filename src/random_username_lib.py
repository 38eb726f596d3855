"""A module for creating random display names like "CuteRedWalrus".

A name is a descriptor, a color and a sea noun, each with its first letter
capitalized, joined without separators:

  generator = UsernameGenerator(rng=random.Random(42))
  generator.generate()     # e.g. 'FloatingAzureSubmarine'
  generator.generate(10)   # e.g. 'CuteWalrus', never longer than 10

When max_size is too small for the whole name, the first of these that fits
is used: descriptor + noun, color + noun, noun, and finally the noun cut to
max_size characters.
"""

import collections
import logging
import optparse
import random
from typing import Optional, Sequence, Text

import random_username_words

MAX_SIZE_ERROR_MESSAGE = (
    'The max_size argument must be an integer number greater than zero.')


class Error(Exception):
  pass


class InvalidArgumentError(Error, ValueError):
  pass


class EmptyWordListError(Error, ValueError):
  pass


class WordLists(collections.namedtuple(
    'WordLists', ['descriptors', 'creature_descriptors', 'colors',
                  'sea_objects', 'sea_creatures'])):
  """The words a UsernameGenerator picks from.

  Use _replace() to derive a bundle with some of the lists swapped out.
  """
  __slots__ = ()

  @property
  def sea_nouns(self) -> Sequence[Text]:
    # Objects first, then creatures; seeded names depend on this order.
    return tuple(self.sea_objects) + tuple(self.sea_creatures)


DEFAULT_WORD_LISTS = WordLists(
    descriptors=random_username_words.DESCRIPTORS,
    creature_descriptors=random_username_words.CREATURE_DESCRIPTORS,
    colors=random_username_words.COLORS,
    sea_objects=random_username_words.SEA_OBJECTS,
    sea_creatures=random_username_words.SEA_CREATURES)


def validate_max_size(max_size) -> None:
  # bool is an int subclass but True is not a size.
  if (isinstance(max_size, bool) or not isinstance(max_size, int) or
      max_size <= 0):
    raise InvalidArgumentError(MAX_SIZE_ERROR_MESSAGE)


def format_word(word: Text) -> Text:
  """Uppercases the first character and leaves the rest alone."""
  return word[:1].upper() + word[1:]


def combine_username(max_size: Optional[int], descriptor: Text, color: Text,
                     noun: Text) -> Text:
  """Returns the longest combination of the parts that fits in max_size.

  Parts are always used whole except for the noun, which is truncated only
  when it does not fit by itself.
  """
  candidates = (
      descriptor + color + noun,
      descriptor + noun,
      color + noun,
      noun,
  )
  if max_size is None:
    return candidates[0]
  for candidate in candidates:
    if len(candidate) <= max_size:
      return candidate
  return noun[:max_size]


class UsernameGenerator(object):
  def __init__(self, word_lists: WordLists = DEFAULT_WORD_LISTS,
               rng=None) -> None:
    # rng only needs randrange(n); the random module itself qualifies.
    self.word_lists = word_lists
    self.rng = random if rng is None else rng

  def _pick(self, words: Sequence[Text], list_name: Text) -> Text:
    if not words:
      raise EmptyWordListError(
          'Cannot pick a word from the empty "{}" list.'.format(list_name))
    return words[self.rng.randrange(len(words))]

  def _descriptor_pool(self, noun: Text) -> Sequence[Text]:
    if noun in self.word_lists.sea_creatures:
      return (self.word_lists.creature_descriptors or
              self.word_lists.descriptors)
    return self.word_lists.descriptors

  def random_noun(self) -> Text:
    return self._pick(self.word_lists.sea_nouns, 'sea_nouns')

  def random_descriptor(self, noun: Text) -> Text:
    pool = self._descriptor_pool(noun)
    if not pool:
      # No descriptor at all is still a usable name.
      return ''
    return self._pick(pool, 'descriptors')

  def random_color(self) -> Text:
    return self._pick(self.word_lists.colors, 'colors')

  def generate(self, max_size: Optional[int] = None) -> Text:
    if max_size is not None:
      validate_max_size(max_size)
    noun = self.random_noun()
    descriptor = self.random_descriptor(noun)
    color = self.random_color()
    username = combine_username(max_size, format_word(descriptor),
                                format_word(color), format_word(noun))
    logging.debug('Generated username "%s" (max_size=%s)', username, max_size)
    return username

  def possible_names(self) -> int:
    """Counts the distinct untruncated names these word lists can produce."""
    total = 0
    # A noun listed twice still yields the same names.
    for noun in dict.fromkeys(self.word_lists.sea_nouns):
      total += max(len(self._descriptor_pool(noun)), 1)
    return total * len(self.word_lists.colors)


_default_generator = UsernameGenerator()


def generate(max_size: Optional[int] = None,
             word_lists: Optional[WordLists] = None, rng=None) -> Text:
  if word_lists is None and rng is None:
    return _default_generator.generate(max_size)
  return UsernameGenerator(word_lists or DEFAULT_WORD_LISTS, rng).generate(
      max_size)


def get_command_line_options(args=None):
  parser = optparse.OptionParser()
  parser.add_option(
      '--count',
      action='store',
      dest='count',
      type='int',
      default=40,
      help='Number of names to print.')
  parser.add_option(
      '--max_size',
      action='store',
      dest='max_size',
      type='int',
      default=None,
      help='Maximum length of each name (default: no limit).')
  parser.add_option(
      '--seed',
      action='store',
      dest='seed',
      type='int',
      default=None,
      help='Seed for a reproducible sequence of names.')
  parser.add_option(
      '--debug',
      action='store_true',
      dest='debug',
      default=False,
      help='Log every generated name.')

  options, _ = parser.parse_args(args)
  if options.count < 0:
    parser.error('The count argument must not be negative.')
  if options.max_size is not None:
    try:
      validate_max_size(options.max_size)
    except InvalidArgumentError as e:
      parser.error(str(e))
  return options


def main(args=None) -> None:
  options = get_command_line_options(args)
  logging.basicConfig(
      level=logging.DEBUG if options.debug else logging.WARNING)

  rng = None if options.seed is None else random.Random(options.seed)
  generator = UsernameGenerator(rng=rng)
  print(generator.possible_names(), 'possible names')
  for _ in range(options.count):
    print(generator.generate(options.max_size))


if __name__ == '__main__':
  main()
