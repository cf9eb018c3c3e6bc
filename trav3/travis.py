#-
# #%L
# Trav3 Python Client
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import re
from contextlib import contextmanager
from urllib.parse import quote

from trav3 import rest
from trav3.config import Trav3Config
from trav3.errors import (
    EnvVarError,
    InvalidAPIEndpoint,
    InvalidArgument,
    InvalidRepository,
)
from trav3.headers import Headers
from trav3.options import Options
from trav3.utils import debug_log

REPOSITORY_PATTERN = re.compile(r"[0-9]+|[A-Za-z0-9_.-]+(?:/|%2F)[A-Za-z0-9_.-]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")
OWNER_PATTERN = re.compile(r"^.*?(?=/|%2F|$)")

BUILD_ACTIONS = ("cancel", "restart")
JOB_ACTIONS = ("cancel", "restart", "debug")
REPOSITORY_ACTIONS = ("activate", "deactivate", "migrate", "star", "unstar")
ENV_VAR_ACTIONS = ("update", "delete")
CRON_INTERVALS = ("daily", "weekly", "monthly")
LOG_OPTIONS = ("text", "delete")


class Travis:
    """
    Client for the Travis CI v3 API, scoped to one repository.

    Holds the API endpoint, the repository, and the query options and
    headers sent with every request. Options and headers may be changed at
    any time and apply to all later requests made through this client,
    including ``follow`` and page navigation on its responses.

    Example:
        travis = Travis("danielpclark/trav3")
        builds = travis.builds()
        if builds.success():
            latest = builds["builds"].first()
            older = builds.page.next()
    """

    def __init__(self, repo, config=None):
        """
        Args:
            repo: Repository id (all digits) or ``owner/name`` slug
            config: Optional Trav3Config; read from the environment if omitted

        Raises:
            InvalidRepository: If repo is not a valid repository name
            InvalidAPIEndpoint: If the configured endpoint is not a Travis CI API host
        """
        self._config = config or Trav3Config()
        self._repo = self._validate_repository(repo)
        self.api_endpoint = self._config.api_endpoint

        self._options = Options(limit=self._config.default_limit)
        self._headers = Headers({
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Travis-API-Version": self._config.API_VERSION,
            "User-Agent": self._config.USER_AGENT,
        })
        if self._config.token:
            self.authorization(self._config.token)

    # --- Client settings ---

    @property
    def config(self) -> Trav3Config:
        return self._config

    @property
    def options(self) -> Options:
        return self._options

    @property
    def headers(self) -> Headers:
        return self._headers

    @property
    def repository_name(self) -> str:
        """The repository id, with ``/`` percent-encoded."""
        return self._repo

    @property
    def api_endpoint(self) -> str:
        return self._api_endpoint

    @api_endpoint.setter
    def api_endpoint(self, endpoint):
        normalized = endpoint.rstrip("/") if isinstance(endpoint, str) else endpoint
        if normalized not in self._config.VALID_API_ENDPOINTS:
            raise InvalidAPIEndpoint(endpoint, self._config.VALID_API_ENDPOINTS)
        self._api_endpoint = normalized

    def defaults(self, args=None, **kwargs):
        """Adds or replaces default query options (e.g. ``limit=10``)."""
        self._options.build(args, **kwargs)
        return self

    def h(self, args=None, **kwargs):
        """Adds or replaces request headers."""
        self._headers.build(args, **kwargs)
        return self

    def authorization(self, token):
        """Sets the ``Authorization: token ...`` header."""
        return self.h({"Authorization": f"token {token}"})

    # --- Requests relative to the API endpoint ---

    def get_path(self, path):
        """GET a path relative to the API endpoint."""
        return rest.get(self, f"{self._api_endpoint}{path}")

    def get_path_with_opts(self, path):
        """GET a path relative to the API endpoint, with the current options."""
        return rest.get(self, self._with_opts(f"{self._api_endpoint}{path}"))

    # --- Owners and repositories ---

    def active(self, owner=None):
        """Active builds for an owner (login or GitHub id)."""
        return self._get(f"{self._owner_path(owner)}/active")

    def owner(self, owner=None):
        """An owner by login or GitHub id; defaults to the repository owner."""
        return self._get(self._owner_path(owner))

    def repositories(self, owner=None):
        return self._get(self._with_opts(f"{self._owner_path(owner)}/repos"))

    def repository(self, repo=None, action=None):
        """
        A repository, or POST one of its actions.

        Args:
            repo: Repository id or slug; defaults to this client's repository
            action: One of activate, deactivate, migrate, star, unstar
        """
        repo = self._repo if repo is None else self._validate_repository(repo)
        if action is None:
            return self._get(f"{self._api_endpoint}/repo/{repo}")
        self._validate_action(action, REPOSITORY_ACTIONS)
        return self._post(f"{self._api_endpoint}/repo/{repo}/{action}")

    def organization(self, org_id):
        return self._get(f"{self._api_endpoint}/org/{self._number(org_id, 'org_id')}")

    def organizations(self):
        return self._get(self._with_opts(f"{self._api_endpoint}/orgs"))

    def installation(self, installation_id):
        return self._get(f"{self._api_endpoint}/installation/{self._number(installation_id, 'installation_id')}")

    def user(self, user_id=None, sync=False):
        """
        The current user, a user by id, or a sync request for that user.

        Raises:
            InvalidArgument: If sync is requested without a user_id
        """
        if user_id is None:
            if sync:
                raise InvalidArgument("sync requires a user_id")
            return self._get(f"{self._api_endpoint}/user")
        path = f"{self._api_endpoint}/user/{self._number(user_id, 'user_id')}"
        if sync:
            return self._post(f"{path}/sync")
        return self._get(path)

    def broadcasts(self):
        return self._get(f"{self._api_endpoint}/broadcasts")

    # --- Branches ---

    def branch(self, name):
        return self._get(f"{self._with_repo}/branch/{self._branch_name(name)}")

    def branches(self):
        return self._get(self._with_opts(f"{self._with_repo}/branches"))

    # --- Builds and jobs ---

    def build(self, build_id, action=None):
        """A build, or cancel/restart it."""
        path = f"{self._api_endpoint}/build/{self._number(build_id, 'build_id')}"
        if action is None:
            return self._get(path)
        self._validate_action(action, BUILD_ACTIONS)
        return self._post(f"{path}/{action}")

    def builds(self, repo=True):
        """Builds of this repository, or of the current user when repo is False."""
        base = self._with_repo if repo else self._api_endpoint
        return self._get(self._with_opts(f"{base}/builds"))

    def build_jobs(self, build_id):
        return self._get(f"{self._api_endpoint}/build/{self._number(build_id, 'build_id')}/jobs")

    def stages(self, build_id):
        return self._get(f"{self._api_endpoint}/build/{self._number(build_id, 'build_id')}/stages")

    def job(self, job_id, action=None):
        """A job, or cancel/restart/debug it."""
        path = f"{self._api_endpoint}/job/{self._number(job_id, 'job_id')}"
        if action is None:
            return self._get(path)
        self._validate_action(action, JOB_ACTIONS)
        return self._post(f"{path}/{action}")

    def log(self, job_id, option=None):
        """
        The log of a job.

        Args:
            job_id: Job id
            option: None for the JSON log, "text" for the plain text log
                (returned as str), or "delete" to delete the log
        """
        path = f"{self._api_endpoint}/job/{self._number(job_id, 'job_id')}/log"
        if option is None:
            return self._get(path)
        self._validate_action(option, LOG_OPTIONS)
        if option == "text":
            return rest.get(self, f"{path}.txt", raw_reply=True)
        return self._delete(path)

    # --- Caches ---

    def caches(self, delete=False):
        """Caches of this repository; deletes them all when delete is True."""
        with self._without_limit():
            url = self._with_opts(f"{self._with_repo}/caches")
            if delete:
                return self._delete(url)
            return self._get(url)

    # --- Crons ---

    def crons(self):
        return self._get(self._with_opts(f"{self._with_repo}/crons"))

    def cron(self, cron_id=None, branch_name=None, create=None, delete=False):
        """
        A cron job by id (optionally deleting it), or the cron of a branch
        (optionally creating it).

        Args:
            cron_id: Cron id
            branch_name: Branch whose cron to read or create
            create: Dict with "interval" (daily, weekly, monthly) and optional
                "dont_run_if_recent_build_exists"
            delete: Delete the cron given by cron_id
        """
        if cron_id is not None:
            path = f"{self._api_endpoint}/cron/{self._number(cron_id, 'cron_id')}"
            if delete:
                return self._delete(path)
            return self._get(path)

        if branch_name is None:
            raise InvalidArgument("cron requires either a cron_id or a branch_name")

        path = f"{self._with_repo}/branch/{self._branch_name(branch_name)}/cron"
        if create is None:
            return self._get(path)

        interval = create.get("interval")
        if interval not in CRON_INTERVALS:
            raise InvalidArgument(f"cron interval must be one of {', '.join(CRON_INTERVALS)}")
        data = {
            "cron.interval": interval,
            "cron.dont_run_if_recent_build_exists": bool(create.get("dont_run_if_recent_build_exists", False)),
        }
        return self._create(path, data)

    # --- Email subscription ---

    def email_resubscribe(self):
        return self._post(f"{self._with_repo}/email_subscription")

    def email_unsubscribe(self):
        return self._delete(f"{self._with_repo}/email_subscription")

    # --- Environment variables ---

    def env_vars(self, create=None):
        """
        Environment variables of this repository, or create one.

        Args:
            create: Dict with "name" (str), "value" (str), "public" (bool)
                and optional "branch"

        Raises:
            EnvVarError: If create lacks a valid name, value or public flag
        """
        path = f"{self._with_repo}/env_vars"
        if create is None:
            return self._get(path)

        if not (isinstance(create.get("name"), str)
                and isinstance(create.get("value"), str)
                and isinstance(create.get("public"), bool)):
            raise EnvVarError()
        data = {f"env_var.{key}": value for key, value in create.items()}
        return self._create(path, data)

    def env_var(self, env_var_id, action=None, **data):
        """An environment variable by id, or update/delete it."""
        if not isinstance(env_var_id, str) or not env_var_id:
            raise InvalidArgument("env_var_id must be a non-empty string")
        path = f"{self._with_repo}/env_var/{env_var_id}"
        if action is None:
            return self._get(path)
        self._validate_action(action, ENV_VAR_ACTIONS)
        if action == "delete":
            return self._delete(path)
        return self._patch(path, {f"env_var.{key}": value for key, value in data.items()})

    # --- Lint ---

    def lint(self, yaml_content):
        """Validates a .travis.yml document."""
        if not isinstance(yaml_content, str):
            raise InvalidArgument("lint expects the YAML content as a string")
        return self._post(f"{self._api_endpoint}/lint", yaml_content)

    # --- Preferences ---

    def preference(self, key, value=None, org_id=None):
        """A user or organization preference, or update it when value is given."""
        base = self._api_endpoint
        if org_id is not None:
            base = f"{base}/org/{self._number(org_id, 'org_id')}"
        path = f"{base}/preference/{key}"
        if value is None:
            return self._get(path)
        return self._patch(path, {"preference.value": value})

    def preferences(self, org_id=None):
        base = self._api_endpoint
        if org_id is not None:
            base = f"{base}/org/{self._number(org_id, 'org_id')}"
        return self._get(f"{base}/preferences")

    # --- Requests ---

    def request(self, request_id):
        return self._get(f"{self._with_repo}/request/{self._number(request_id, 'request_id')}")

    def requests(self, **attributes):
        """Build requests of this repository, or trigger one with the given attributes."""
        path = f"{self._with_repo}/requests"
        if not attributes:
            return self._get(self._with_opts(path))
        return self._create(path, {"request": attributes})

    def messages(self, request_id):
        return self._get(f"{self._with_repo}/request/{self._number(request_id, 'request_id')}/messages")

    # --- Settings ---

    def setting(self, name, value=None):
        path = f"{self._with_repo}/setting/{name}"
        if value is None:
            return self._get(path)
        return self._patch(path, {"setting.value": value})

    def settings(self):
        return self._get(f"{self._with_repo}/settings")

    # --- Internals ---

    @property
    def _with_repo(self):
        return f"{self._api_endpoint}/repo/{self._repo}"

    @property
    def _username(self):
        return OWNER_PATTERN.match(self._repo).group(0)

    def _owner_path(self, owner):
        owner = self._username if owner is None else str(owner)
        if DIGITS_PATTERN.fullmatch(owner):
            return f"{self._api_endpoint}/owner/github_id/{owner}"
        return f"{self._api_endpoint}/owner/{owner}"

    def _with_opts(self, url):
        """Appends the current options to url, skipping keys it already has."""
        options = self._options.to_h()
        if not options:
            return url
        _, _, existing = url.partition("?")
        present = {pair.split("=", 1)[0] for pair in existing.split("&") if pair}
        extra = "&".join(f"{key}={value}" for key, value in options.items() if key not in present)
        if not extra:
            return url
        return f"{url}&{extra}" if existing else f"{url}?{extra}"

    @contextmanager
    def _without_limit(self):
        with self._options.immutable() as opts:
            opts.remove("limit")
            yield

    def _get(self, url):
        return rest.get(self, url)

    def _post(self, url, body=None):
        return rest.post(self, url, body)

    def _create(self, url, data):
        return rest.create(self, url, data)

    def _patch(self, url, data):
        return rest.patch(self, url, data)

    def _delete(self, url):
        return rest.delete(self, url)

    @staticmethod
    def _validate_repository(repo):
        if not isinstance(repo, str) or not REPOSITORY_PATTERN.fullmatch(repo):
            raise InvalidRepository(repo)
        return repo.replace("/", "%2F")

    @staticmethod
    def _validate_action(action, allowed):
        if action not in allowed:
            raise InvalidArgument(f"{action!r} is not one of {', '.join(allowed)}")
        debug_log(f"Requested action: {action}")

    @staticmethod
    def _number(value, name):
        if isinstance(value, bool):
            raise InvalidArgument(f"{name} must be a number, got {value!r}")
        if isinstance(value, int) and value >= 0:
            return str(value)
        if isinstance(value, str) and DIGITS_PATTERN.fullmatch(value):
            return value
        raise InvalidArgument(f"{name} must be a number, got {value!r}")

    @staticmethod
    def _branch_name(name):
        if not isinstance(name, str) or not name:
            raise InvalidArgument("branch name must be a non-empty string")
        return quote(name, safe="")

    def __repr__(self):
        return f"<Travis repository={self._repo!r} api_endpoint={self._api_endpoint!r}>"
