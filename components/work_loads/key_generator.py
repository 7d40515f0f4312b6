import random
import string


def generate_numeric_keys(num_keys, start=0):
  """
  Return decimal string keys ``str(i)`` for ``start <= i < start + num_keys``.

  Matches the classic hash-vs-trie benchmark: keys are short, dense, and share
  long prefixes once ``num_keys`` grows past a few thousand.
  """
  if num_keys < 1:
    raise ValueError("num_keys must be at least 1")
  return [str(i) for i in range(start, start + num_keys)]


def generate_random_keys(num_keys, seed=None, alphabet=string.ascii_lowercase,
                         min_len=3, max_len=10, unique=False):
  """
  Return n random keys drawn from ``alphabet``.
  - unique=False: keys may repeat
  - unique=True: every key is distinct (raises if the key space is too small)
  """
  if num_keys < 1:
    raise ValueError("num_keys must be at least 1")
  if min_len < 0 or max_len < min_len:
    raise ValueError("require 0 <= min_len <= max_len")
  if not alphabet:
    raise ValueError("alphabet must not be empty")
  if unique:
    space = sum(len(alphabet) ** n for n in range(min_len, max_len + 1))
    if num_keys > space:
      raise ValueError(f"num_keys must be at most {space} for unique keys")

  rng = random.Random(seed)
  keys = []
  seen = set()
  while len(keys) < num_keys:
    key = "".join(rng.choices(alphabet, k=rng.randint(min_len, max_len)))
    if unique:
      if key in seen:
        continue
      seen.add(key)
    keys.append(key)
  return keys


def generate_prefixed_keys(num_keys, prefixes, seed=None, prefix_freq=0.5,
                           alphabet=string.ascii_lowercase, min_len=1, max_len=6):
  """Random keys where roughly ``prefix_freq`` of them start with one of ``prefixes``.

  Used to give prefix scans something to find.
  """
  if prefix_freq < 0 or prefix_freq > 1:
    raise ValueError("prefix_freq must be between 0 and 1")
  if not prefixes:
    raise ValueError("prefixes must not be empty")
  rng = random.Random(seed)
  tails = generate_random_keys(num_keys, seed=rng.randrange(2**32), alphabet=alphabet,
                               min_len=min_len, max_len=max_len)
  out = []
  for tail in tails:
    if rng.random() < prefix_freq:
      out.append(rng.choice(prefixes) + tail)
    else:
      out.append(tail)
  return out
