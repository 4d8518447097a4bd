import sys
import logging
import argparse
import configparser
from pathlib import Path

from . import __version__
from .charset import Criteria, resolve_charset
from .entropy import suggest_password_length
from .errors import RandpassError, EntropyInsufficient
from .generator import PasswordRequest, generate
from .strength import is_weak
from .stringutil import parse_escape_sequences, nt_escape
from .ui import print_info, print_hint, print_warning, print_error
from . import pwgen

DATA_DIR = Path('~/.randpass')
DEFAULT_REGEX = '[A-Za-z0-9]'
DEFAULT_NUMBER = 1

log = logging.getLogger(__name__)


class Config:

    """Defaults for command line options, read from INI file.

    Example::

        [randpass]
        length = 24
        extra = !@#
        log_level = DEBUG

    """

    def __init__(self, config_file=None):
        self.length = pwgen.DEFAULT_LENGTH
        self.number = DEFAULT_NUMBER
        self.extra = ''
        self.delimiter = None
        self.log_level = 'WARNING'
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        config = configparser.ConfigParser(interpolation=None)
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'randpass':
                print_warning(f"unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if key in ('length', 'number'):
                    try:
                        value = section.getint(key)
                        if value < 0:
                            raise ValueError(value)
                        setattr(self, key, value)
                    except ValueError:
                        print_warning(f"invalid value {section[key]!r} for key {key!r} "
                                      f"in config {str(config_file)!r}")
                elif key in ('extra', 'delimiter'):
                    setattr(self, key, section[key])
                elif key == 'log_level':
                    level = section[key].upper()
                    if isinstance(logging.getLevelName(level), int):
                        self.log_level = level
                    else:
                        print_warning(f"invalid log level {section[key]!r} "
                                      f"in config {str(config_file)!r}")
                else:
                    print_warning(f"unknown key [{section.name!r}] {key!r} "
                                  f"in config {str(config_file)!r}")


def report_entropy(request: PasswordRequest, verbose=False, quiet=False, fail=False):
    """Inform about password strength, raise if weak and `fail` is set."""
    entropy = request.entropy()
    if not is_weak(entropy):
        if verbose:
            print_info(f"your password has {entropy:.2f} bits of entropy ({request.tier()})")
        return
    if fail:
        raise EntropyInsufficient(entropy)
    if quiet:
        return
    print_warning(f"your password has only {entropy:.2f} bits of entropy")
    suggested_length = suggest_password_length(len(request.charset.alphabet),
                                               request.charset.multiplicities)
    if suggested_length is not None:
        print_hint(f"set '--length' to '{suggested_length}' or longer "
                   f"(use '--quiet' to hide this message)")


def get_newline(delimiter, last_line: bool, no_newline: bool) -> str:
    if delimiter is not None:
        return '' if last_line else parse_escape_sequences(delimiter)
    if last_line and no_newline:
        return ''
    return '\n'


def run(config_file, length, number, criteria, base, regex, extra,
        format_string, no_newline, delimiter, quiet, verbose, fail):
    cfg = Config(config_file)
    logging.basicConfig(level=cfg.log_level)
    length = cfg.length if length is None else length
    number = cfg.number if number is None else number
    extra = cfg.extra if extra is None else extra
    delimiter = cfg.delimiter if delimiter is None else delimiter
    if delimiter is not None:
        log.debug("Delimiter: %s", nt_escape(delimiter))

    charset = resolve_charset(base=base, extra=extra, criteria=criteria, regex=regex)
    request = PasswordRequest(charset, length, number)
    report_entropy(request, verbose=verbose, quiet=quiet, fail=fail)

    results = generate(request)
    for i, result in enumerate(results):
        newline = get_newline(delimiter, i == len(results) - 1, no_newline)
        if format_string is not None:
            output = format_string.replace('{}', result.password)
        else:
            output = result.password
        sys.stdout.write(output + newline)
    sys.stdout.flush()


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="randpass",
                                 description="Password generator")
    ap.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    ap.add_argument('-l', '--length', type=int,
                    help=f"length of the password (default: {pwgen.DEFAULT_LENGTH})")
    ap.add_argument('-n', '--number', type=int,
                    help=f"number of passwords to generate (default: {DEFAULT_NUMBER})")

    base_grp = ap.add_mutually_exclusive_group()
    base_grp.add_argument('-u', '--uppercase', dest='criteria', action='store_const',
                          const=Criteria.UPPERCASE_AND_DIGITS,
                          help="use uppercase letters and digits only")
    base_grp.add_argument('-L', '--lowercase', dest='criteria', action='store_const',
                          const=Criteria.LOWERCASE_AND_DIGITS,
                          help="use lowercase letters and digits only")
    base_grp.add_argument('-d', '--digits', dest='criteria', action='store_const',
                          const=Criteria.DIGITS,
                          help="use digits only")
    base_grp.add_argument('-s', '--symbols', dest='criteria', action='store_const',
                          const=Criteria.ALL_PRINTABLE,
                          help="use all letters, digits, and symbols")
    base_grp.add_argument('-b', '--base', type=str,
                          help="custom base character set to use")
    base_grp.add_argument('-r', '--regex', type=str, default=DEFAULT_REGEX,
                          help="regex pattern for allowed characters (default: %(default)s)")

    ap.add_argument('-e', '--extra', type=str,
                    help="extra characters to include, repeat a character "
                         "to include it more times")
    ap.add_argument('-f', '--format', dest='format_string', type=str,
                    help="customize the output format, '{}' is replaced by the password")
    ap.add_argument('-N', '--no-newline', action='store_true',
                    help="do not print the trailing newline character")
    ap.add_argument('-D', '--delimiter', type=str,
                    help="use a custom delimiter (escape sequences are interpreted)")

    verbosity_grp = ap.add_mutually_exclusive_group()
    verbosity_grp.add_argument('-q', '--quiet', action='store_true',
                               help="do not warn about weak passwords")
    verbosity_grp.add_argument('-v', '--verbose', action='store_true',
                               help="always output the strength of the password")
    ap.add_argument('-F', '--fail', action='store_true',
                    help="terminate if the password is weak")
    ap.add_argument('-c', '--config', dest='config_file',
                    default=DATA_DIR / 'randpass.conf',
                    help="config file (default: %(default)s)")

    return ap.parse_args(args=argv)


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: None
    """
    args = parse_args(argv)
    try:
        run(**vars(args))
    except RandpassError as e:
        print_error(str(e))
        sys.exit(1)
