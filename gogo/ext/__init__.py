"""Extensions: conditionals, consumer sets, body dumps, mapping, ordering, pub/sub and registries."""