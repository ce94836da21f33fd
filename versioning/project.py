#: Project name.
name = 'versioning'
abstract = 'layout driven parsing and formatting of version strings'
icon = '🔖'

#: IRI based project identity. (project homepage)
identity = 'https://fault.io/project/python/versioning'

#: Responsible Party
controller = 'fault.io'

#: Contact point for the Responsible Party
contact = 'mailto:critical@fault.io'

#: Conceptual Branch
fork = 'layout'

#: Version tuple: (major, minor, patch)
version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
