"""
Mime-type parsing and matching against HTTP Accept headers, as described
in section 14.1 of RFC 2616.

  * :func:`parse_mime_type` carves a mime-type into its component parts
  * :func:`parse_media_range` does the same for a media range and
    guarantees a usable ``q`` parameter
  * :func:`quality` gives the quality of a mime-type against a header
  * :func:`best_match` chooses the supported mime-type the client
    prefers
  * :func:`rank` yields every acceptable supported mime-type, best first
"""

__all__ = ['MimeTypeParseError', 'ParsedMediaType', 'ScoredCandidate',
           'parse_mime_type', 'parse_media_range',
           'fitness_and_quality_parsed', 'quality_parsed', 'quality',
           'best_match', 'rank']

from collections import namedtuple
from functools import cmp_to_key
import logging

log = logging.getLogger("mimeparse")

ParsedMediaType = namedtuple("ParsedMediaType", ["type", "subtype", "parameters"])
ScoredCandidate = namedtuple("ScoredCandidate", ["fitness", "quality", "label", "sequence"])


class MimeTypeParseError(ValueError):
    pass


def parse_mime_type(mime_type):
    """
    Carve up a mime-type into a :class:`ParsedMediaType`. For example
    ``application/xhtml;q=0.5`` becomes::

        ('application', 'xhtml', {'q': '0.5'})

    Parameter segments that do not contain exactly one ``=`` are
    dropped.
    """
    parts = mime_type.split(";")
    params = {}
    for p in parts[1:]:
        if p.count("=") != 1:
            continue
        k, v = p.split("=")
        params[k.strip()] = v.strip()

    full_type = parts[0].strip()
    # Java's URLConnection sends a bare "*"
    if full_type == "*":
        full_type = "*/*"

    types = full_type.split("/")
    if len(types) < 2:
        raise MimeTypeParseError("can't parse mime-type %r" % (mime_type,))

    return ParsedMediaType(types[0].strip().lower(), types[1].strip().lower(), params)


def parse_media_range(media_range):
    """
    Like :func:`parse_mime_type` but the parameters are guaranteed to
    hold a ``q`` value between 0 and 1. A missing or empty ``q`` is
    filled in as ``"1"`` and so is one that is out of range. A ``q``
    that is not a number at all raises :exc:`ValueError`.
    """
    parsed = parse_mime_type(media_range)
    q = parsed.parameters.get("q", "1")
    d = float(q or "1")
    if not 0 <= d <= 1:
        q = "1"
    parsed.parameters["q"] = q or "1"
    return parsed


def _parse_header(header):
    return [parse_media_range(r) for r in header.split(",") if r.strip()]


def fitness_and_quality_parsed(mime_type, parsed_ranges):
    """
    Find the best match for *mime_type* amongst ranges that have already
    been through :func:`parse_media_range`. Returns a tuple of the
    fitness and the quality of the best matching range, or ``(-1, 0)``
    when nothing matched.

    Fitness is 100 for an exact type, 10 for an exact subtype and one
    more for every matching parameter. The comparison with the best so
    far is made once per parameter of the target, ``q`` included, so
    the parameter count it sees is the one accumulated up to that key.
    """
    best_fitness = -1
    best_fit_q = 0
    target = parse_media_range(mime_type)

    for parsed in parsed_ranges:
        type_match = target.type == parsed.type or "*" in (target.type, parsed.type)
        subtype_match = (target.subtype == parsed.subtype or
                         "*" in (target.subtype, parsed.subtype))
        if not (type_match and subtype_match):
            continue

        param_matches = 0
        for k, v in target.parameters.items():
            if k != "q" and parsed.parameters.get(k) == v:
                param_matches += 1

            fitness = 100 if parsed.type == target.type else 0
            fitness += 10 if parsed.subtype == target.subtype else 0
            fitness += param_matches

            if fitness > best_fitness:
                best_fitness = fitness
                best_fit_q = float(parsed.parameters["q"])

    return best_fitness, best_fit_q


def quality_parsed(mime_type, parsed_ranges):
    return fitness_and_quality_parsed(mime_type, parsed_ranges)[1]


def quality(mime_type, ranges):
    """
    The quality ``q`` of *mime_type* against the media ranges in an
    Accept header::

        >>> quality('text/html', 'text/*;q=0.3, text/html;q=0.7, */*;q=0.5')
        0.7
    """
    return quality_parsed(mime_type, _parse_header(ranges))


def _cmp_candidates(x, y):
    if x.fitness != y.fitness:
        return -1 if x.fitness < y.fitness else 1
    if x.quality != y.quality:
        return -1 if x.quality < y.quality else 1
    return -1 if x.sequence < y.sequence else 1 if x.sequence > y.sequence else 0


def _weighted_matches(supported, header):
    parsed_header = _parse_header(header)
    weighted = []
    for seq, mime_type in enumerate(supported):
        fitness, q = fitness_and_quality_parsed(mime_type, parsed_header)
        log.debug("%s: fitness %s quality %s", mime_type, fitness, q)
        weighted.append(ScoredCandidate(fitness, q, mime_type, seq))
    weighted.sort(key=cmp_to_key(_cmp_candidates))
    return weighted


def best_match(supported, header):
    """
    Choose from *supported* the mime-type that best fits the media
    ranges in *header*, which is the value of an HTTP Accept header.
    Ties go to the type listed later in *supported*. An empty string
    means that nothing is acceptable::

        >>> best_match(['application/xbel+xml', 'text/xml'], 'text/*;q=0.5,*/*; q=0.1')
        'text/xml'
    """
    weighted = _weighted_matches(supported, header)
    if not weighted or weighted[-1].quality == 0:
        log.debug("no acceptable match for %r in %r", header, supported)
        return ""
    return weighted[-1].label


def rank(supported, header):
    """
    Generate the acceptable mime-types from *supported*, most preferred
    first, leaving out those the client gave a quality of zero.
    """
    for candidate in reversed(_weighted_matches(supported, header)):
        if candidate.quality != 0:
            yield candidate.label
