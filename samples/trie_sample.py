#!/usr/bin/env python3
"""Walk through every enumeration mode on a small trie."""

from bytetrie import ByteTrie

trie = ByteTrie()
trie['adc'] = 100
trie['abc'] = 200
trie['xyz'] = 300
trie['def'] = 400
trie['abcd'] = 500
trie['abcee'] = 600

print('--- each')
trie.each(lambda k, v: print(f"{k.decode()}: {v}"))
print('--- each_key')
trie.each_key(lambda k: print(k.decode()))
print('--- each_value')
trie.each_value(print)
print('--- common_prefix_each')
trie.common_prefix_each('abc', lambda k, v: print(f"{k.decode()}: {v}"))
print('--- size')
print(trie.size())
