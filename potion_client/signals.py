from blinker import Namespace

_potion_client = Namespace()

before_create = _potion_client.signal('before-create')

after_create = _potion_client.signal('after-create')

before_update = _potion_client.signal('before-update')

after_update = _potion_client.signal('after-update')

before_delete = _potion_client.signal('before-delete')

after_delete = _potion_client.signal('after-delete')

before_attach = _potion_client.signal('before-attach')

after_attach = _potion_client.signal('after-attach')

before_sync = _potion_client.signal('before-sync')

after_sync = _potion_client.signal('after-sync')
