# malcolm

`malcolm` listens for ARP traffic on a Linux host and waits for an ARP
request from a chosen host. When that host asks who owns a chosen IP
address, it answers with a forged ARP reply that claims the IP for a MAC
address you give. It sends one reply and then exits. Use it only on
networks you own or are allowed to test.

## Installation

```
pip install .
```

The command opens an `AF_PACKET` raw socket. That needs root, or the
`CAP_NET_RAW` capability, and exists only on Linux. Where it is missing
the command prints an error and exits with status 1.

## Usage

```
malcolm <source_ip> <source_mac> <target_ip> <target_mac>
```

- `source_ip`: the IP address to claim, for example the gateway.
- `source_mac`: the MAC address to give out for `source_ip`.
- `target_ip`, `target_mac`: the host whose request gets the answer.

Example with made-up addresses:

```
sudo malcolm 10.0.0.1 2:0:0:0:0:aa 10.0.0.20 2:0:0:0:0:bb
```

The tool prints `Listening for ARP packets...` and then a dump of every
ARP frame it receives. When the target's request arrives it prints that
request, builds the reply, prints the reply, sends it out of the
interface the request came in on (addressed to the target's MAC) and
exits with status 0.

### How the target's request is recognised

A frame counts as the target's request when all three of these hold:

- the ARP sender MAC, written in lower-case hex **without** leading zeros
  (`2:0:0:0:0:bb`, not `02:00:00:00:00:bb`), begins with `target_mac`;
- the ARP sender IP in dotted-quad form begins with `target_ip`;
- the ARP target IP in dotted-quad form begins with `source_ip`.

The comparison is on text and by prefix, so give `target_mac` in that
unpadded lower-case form, and note that `10.0.0.2` would also match a
request from `10.0.0.20`.

### Argument checks

Each bad argument is reported on standard error and the command exits
with status 1:

- wrong argument count: the usage line is printed;
- IPv4 addresses must be four dot-separated fields of one to three
  digits, each at most 255; a field with a leading zero is read as octal;
  `0.0.0.0` and `255.255.255.255` are rejected;
- MAC addresses must be six colon-separated fields of one or two hex
  digits; `00:00:00:00:00:00` and `ff:ff:ff:ff:ff:ff` are rejected.

## What it does not do

It answers a single request and stops. It does not keep re-sending
replies, does not restore anyone's ARP cache afterwards, does not forward
traffic, has no option to choose an interface, and handles IPv4 over
Ethernet only.

## Library use

The parsing and packet code can be used from Python:

```python
from malcolm.parse import parse_args, parse_ip, parse_mac
from malcolm.packet import ArpPacket, build_reply

config = parse_args(["malcolm", "10.0.0.1", "2:0:0:0:0:aa",
                     "10.0.0.20", "2:0:0:0:0:bb"])
reply = build_reply(config)
print(reply.describe())
frame = reply.to_bytes()          # 42 bytes: Ethernet header + ARP
assert ArpPacket.from_bytes(frame) == reply
```

- `malcolm.parse`: `parse_ip` and `parse_mac` return the address as
  bytes; `parse_args` takes a full argument vector (program name first)
  and returns a `MalcolmConfig`. Invalid input raises `ParseError`.
- `malcolm.packet`: `ArpPacket` with `from_bytes`, `to_bytes` and
  `describe`; `build_reply`; `format_mac` and `format_ip`.
- `malcolm.cli`: `is_target_request`, `send_reply`, `listen` and `main`,
  the function behind the `malcolm` command.

The package also has small helpers:

- `malcolm.text`: C-style string functions: `split`, `strtrim`, `substr`,
  `strjoin`, `strnstr`, `strncmp`, `strchr`, `strrchr`, `strmapi`,
  `striteri`.
- `malcolm.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower`, `toupper`, `atoi`, `itoa`.
- `malcolm.memory`: `memchr`, `memcmp`, `memset`, `memmove` on byte
  buffers, and `strlcpy`, `strlcat`, which return the resulting text with
  the length the full copy would have had.
- `malcolm.printf`: `format`, `printf` and `to_base` with the `%c %s %p
  %d %i %u %x %X %%` conversions (a bad format raises `FormatError`), and
  the writers `put_char`, `put_str`, `put_endl`, `put_number`.
- `malcolm.linked`: `LinkedList`, a singly linked list.
- `malcolm.lines`: `LineReader` and `read_lines`, which read a text or
  binary stream one line at a time in chunks of a fixed size.

## Tests

```
pip install .[test]
pytest
```