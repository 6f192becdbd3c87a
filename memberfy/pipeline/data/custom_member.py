# memberfy/pipeline/data/custom_member.py
# Пиксельный "member": 1024x1024, палитра по уменьшенной до 25x25 аватарке.

HEADER = '<svg xmlns="http://www.w3.org/2000/svg" width="1024" height="1024" fill="none">'
FOOTER = '</svg>'

GRID = (9, 9)
DOWNSAMPLE = (25, 25)

COORDINATES = [
    (4, 4),  # голова
    (5, 4),  # голова
    (0, 0),  # ничего не меняет
    (5, 5),  # noggles
    (4, 6),  # тело
    (4, 7),  # бровь
    (0, 0),  # фон
    (1, 5),  # ничего не меняет
    (4, 6),  # тело
]

FRAGMENTS = [
    '<path fill="COLOR" d="M384 256h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm-299 43h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm-342 85h-42v43h42v-43Zm86 0h-43v43h43v-43Zm85 0h-43v43h43v-43Zm85 0h-42v43h42v-43Zm86 0h-43v43h43v-43Z"/>',
    '<path fill="COLOR" d="M299 341h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm-426 43h-43v43h43v-43Zm85 0h-43v43h43v-43Zm85 0h-42v43h42v-43Zm86 0h-43v43h43v-43Zm85 0h-43v43h43v-43Zm85 0h-42v43h42v-43Z"/>',
    '<path fill="#fff" d="M469 512h-42v43h42v-43Zm214 0h-43v43h43v-43Z"/>',
    '<path fill="COLOR" d="M384 427h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm85 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm-426 42h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm128 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm128 0h-42v43h42v-43Zm-426 43h-43v43h43v-43Zm85 0h-43v43h43v-43Zm128 0h-43v43h43v-43Zm85 0h-42v43h42v-43Zm128 0h-42v43h42v-43Zm-341 43h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm85 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Z"/>',
    '<path fill="COLOR" d="M341 427h-42v42h42v-42Zm214 0h-43v42h43v-42Zm-214 85h-42v43h42v-43Zm214 0h-43v43h43v-43Zm-214 43h-42v42h42v-42Zm214 0h-43v42h43v-42Zm-214 42h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-299 43h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm128 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-256 43h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Z"/>',
    '<path fill="COLOR" d="M427 469h-43v43h43v-43Zm42 0h-42v43h42v-43Zm171 0h-43v43h43v-43Zm43 0h-43v43h43v-43ZM512 768h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Z"/>',
    '<path fill="COLOR" d="M43 0H0v43h43V0Zm42 0H43v43h42V0Zm43 0H85v43h43V0Zm43 0h-43v43h43V0Zm42 0h-42v43h42V0Zm43 0h-43v43h43V0Zm43 0h-43v43h43V0Zm42 0h-42v43h42V0Zm43 0h-43v43h43V0Zm43 0h-43v43h43V0Zm42 0h-42v43h42V0Zm43 0h-43v43h43V0Zm43 0h-43v43h43V0Zm42 0h-42v43h42V0Zm43 0h-43v43h43V0Zm43 0h-43v43h43V0Zm42 0h-42v43h42V0Zm43 0h-43v43h43V0Zm43 0h-43v43h43V0Zm42 0h-42v43h42V0Zm43 0h-43v43h43V0Zm43 0h-43v43h43V0Zm42 0h-42v43h42V0Zm43 0h-43v43h43V0ZM43 43H0v42h43V43Zm42 0H43v42h42V43Zm43 0H85v42h43V43Zm43 0h-43v42h43V43Zm42 0h-42v42h42V43Zm43 0h-43v42h43V43Zm43 0h-43v42h43V43Zm42 0h-42v42h42V43Zm43 0h-43v42h43V43Zm43 0h-43v42h43V43Zm42 0h-42v42h42V43Zm43 0h-43v42h43V43Zm43 0h-43v42h43V43Zm42 0h-42v42h42V43Zm43 0h-43v42h43V43Zm43 0h-43v42h43V43Zm42 0h-42v42h42V43Zm43 0h-43v42h43V43Zm43 0h-43v42h43V43Zm42 0h-42v42h42V43Zm43 0h-43v42h43V43Zm43 0h-43v42h43V43Zm42 0h-42v42h42V43Zm43 0h-43v42h43V43ZM43 85H0v43h43V85Zm42 0H43v43h42V85Zm43 0H85v43h43V85Zm43 0h-43v43h43V85Zm42 0h-42v43h42V85Zm43 0h-43v43h43V85Zm43 0h-43v43h43V85Zm42 0h-42v43h42V85Zm43 0h-43v43h43V85Zm43 0h-43v43h43V85Zm42 0h-42v43h42V85Zm43 0h-43v43h43V85Zm43 0h-43v43h43V85Zm42 0h-42v43h42V85Zm43 0h-43v43h43V85Zm43 0h-43v43h43V85Zm42 0h-42v43h42V85Zm43 0h-43v43h43V85Zm43 0h-43v43h43V85Zm42 0h-42v43h42V85Zm43 0h-43v43h43V85Zm43 0h-43v43h43V85Zm42 0h-42v43h42V85Zm43 0h-43v43h43V85ZM43 128H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 171H0v42h43v-42Zm42 0H43v42h42v-42Zm43 0H85v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42ZM43 213H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm342 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 256H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm426 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 299H0v42h43v-42Zm42 0H43v42h42v-42Zm43 0H85v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm512 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42ZM43 341H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm598 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 384H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm598 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 427H0v42h43v-42Zm42 0H43v42h42v-42Zm43 0H85v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm512 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42ZM43 469H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 512H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 555H0v42h43v-42Zm42 0H43v42h42v-42Zm43 0H85v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm512 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42ZM43 597H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 640H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 683H0v42h43v-42Zm42 0H43v42h42v-42Zm43 0H85v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm512 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42ZM43 725H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 768H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 811H0v42h43v-42Zm42 0H43v42h42v-42Zm43 0H85v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm512 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42ZM43 853H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 896H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43ZM43 939H0v42h43v-42Zm42 0H43v42h42v-42Zm43 0H85v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm512 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42ZM43 981H0v43h43v-43Zm42 0H43v43h42v-43Zm43 0H85v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm512 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Z"/>',
    '<path fill="black" d="M384 213h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm-299 43h-42v43h42v-43Zm342 0h-43v43h43v-43Zm-384 43h-43v42h43v-42Zm426 0h-42v42h42v-42Zm-469 42h-43v43h43v-43Zm512 0h-43v43h43v-43Zm-512 43h-43v43h43v-43Zm512 0h-43v43h43v-43Zm-469 43h-43v42h43v-42Zm0 128h-43v42h43v-42Zm0 42h-43v43h43v-43Zm426 0h-42v43h42v-43Zm-426 43h-43v43h43v-43Zm42 0h-42v43h42v-43Zm384 0h-42v43h42v-43Zm-426 43h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm299 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm-426 42h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm-426 43h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm171 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm-426 43h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm-426 42h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm-426 43h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm-426 43h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm-426 42h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43ZM555 640h-43v43h43v-43Zm42 0h-42v43h42v-43ZM427 512h-43v43h43v-43Zm213 0h-43v43h43v-43Z"/>',
    '<path fill="COLOR" d="M341 597h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-342 43h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm128 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-342 43h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm-342 42h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-342 43h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm171 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-342 43h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm-342 42h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-342 43h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm-342 43h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm42 0h-42v42h42v-42Zm43 0h-43v42h43v-42Zm43 0h-43v42h43v-42Zm-342 42h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Zm43 0h-43v43h43v-43Zm43 0h-43v43h43v-43Z"/>',
    '<path fill="black" d="M555 640h-43v43h43v-43Zm42 0h-42v43h42v-43Zm-85 128h-43v43h43v-43Zm43 0h-43v43h43v-43Zm42 0h-42v43h42v-43Z"/>',
]
