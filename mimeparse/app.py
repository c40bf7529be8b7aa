"""
:program:`mimeparse`

Pick the best of a list of supported mime-types for an HTTP Accept
header and print it::

  % mimeparse -s application/xbel+xml -s text/xml 'text/*;q=0.5,*; q=0.1'
  text/xml

An empty line is printed when none of the supported types is
acceptable. The header defaults to ``*/*``.

The supported types may also be put in a configuration file. If you
have a file called *conf.py* with::

  { "supported": ["application/json", "text/html"], "loglevel": "debug" }

then::

  % mimeparse -c conf.py 'application/json, text/javascript, */*'
  application/json

Options given on the command line take precedence over the
configuration file. With *-q TYPE* the quality of TYPE against the
header is printed instead, and with *-a* every acceptable supported
type is printed, one per line, best first.
"""

__all__ = ['MimeParse']

from ast import literal_eval
from optparse import OptionParser
from traceback import format_exc
import logging
import sys

from mimeparse.accept import best_match, quality, rank

log = logging.getLogger("mimeparse")


class MimeParse(object):
    opt_parser = OptionParser(usage=__doc__)
    opt_parser.add_option("-c", "--config",
                          dest="config",
                          default=None,
                          help="configuration file")
    opt_parser.add_option("-d", "--debug",
                          dest="debug",
                          default=False,
                          action="store_true",
                          help="debug")
    opt_parser.add_option("-s", "--supported",
                          dest="supported",
                          action="append",
                          help="supported mime-type, may be repeated")
    opt_parser.add_option("-q", "--quality",
                          dest="quality",
                          default=None,
                          help="print the quality of this mime-type instead")
    opt_parser.add_option("-a", "--all",
                          dest="all",
                          default=False,
                          action="store_true",
                          help="print every acceptable type, best first")
    opt_parser.add_option("-l", "--logfile",
                          dest="logfile", default=None,
                          help="log to file")
    opt_parser.add_option("-v", "--verbosity",
                          dest="loglevel", default=None,
                          help="log verbosity. one of debug, info, warning, error, critical")
    config = {
        "supported": ["application/xbel+xml", "text/xml"],
        "loglevel": "warning",
        "logformat": "%(asctime)s %(levelname)s  [%(name)s] %(message)s",
        }

    def __init__(self, argv=None):
        self.opts, self.args = self.opt_parser.parse_args(argv)
        self.config = dict(self.config)
        if self.opts.config:
            with open(self.opts.config) as fp:
                self.config.update(literal_eval(fp.read()))

        for k, v in self.opts.__dict__.items():
            if v: self.config[k] = v

        ## set up logging
        logcfg = {
            "format": self.config.get("logformat"),
            }
        if self.config.get("logfile"):
            logcfg["filename"] = self.config.get("logfile")

        levels = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR,
            "critical": logging.CRITICAL
            }
        logcfg["level"] = levels.get(self.config.get("loglevel"), logging.NOTSET)
        logging.basicConfig(**logcfg)

        log.debug("%s starting up", self.__class__.__name__)

    @property
    def header(self):
        return self.args[0] if self.args else "*/*"

    def __call__(self, out=None):
        out = out or sys.stdout
        try:
            for line in self.request(self.config["supported"], self.header):
                out.write(line + "\n")
        except ValueError as e:
            log.error("%r against %r: %s", self.header, self.config["supported"], e)
            if self.opts.debug:
                log.error("exception:\n%s", format_exc())
            sys.stderr.write("mimeparse: %s\n" % e)
            return 1
        return 0

    def request(self, supported, header):
        if self.opts.quality:
            return ["%s" % quality(self.opts.quality, header)]
        if self.opts.all:
            return list(rank(supported, header))
        return [best_match(supported, header)]
